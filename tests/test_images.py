"""Tests for entry photo compression."""

import io

import pytest
from PIL import Image

from lookback.images import compress_image


def make_png(size=(400, 200), mode="RGBA") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, (200, 100, 50, 255) if mode == "RGBA" else 128).save(buffer, format="PNG")
    return buffer.getvalue()


class TestCompressImage:
    def test_outputs_rgb_jpeg(self):
        data = compress_image(make_png())

        with Image.open(io.BytesIO(data)) as image:
            assert image.format == "JPEG"
            assert image.mode == "RGB"
            assert image.size == (400, 200)

    def test_downscales_to_max_size(self):
        data = compress_image(make_png((1000, 500)), max_size=100)

        with Image.open(io.BytesIO(data)) as image:
            assert image.size == (100, 50)

    def test_reads_from_path(self, tmp_path):
        path = tmp_path / "photo.png"
        path.write_bytes(make_png(mode="L"))

        data = compress_image(path)

        assert data[:2] == b"\xff\xd8"

    def test_lower_quality_is_smaller(self):
        noisy = Image.effect_noise((256, 256), 64).convert("RGB")
        buffer = io.BytesIO()
        noisy.save(buffer, format="PNG")

        high = compress_image(buffer.getvalue(), quality=95)
        low = compress_image(buffer.getvalue(), quality=10)

        assert len(low) < len(high)

    def test_rejects_non_image(self):
        with pytest.raises(ValueError, match="Unreadable image"):
            compress_image(b"this is not an image")
