"""Unit tests for the Pillow-backed avatar decoder."""

from io import BytesIO

import pytest
from PIL import Image, UnidentifiedImageError

from profile_card.utils.image_loader import decode_image, decode_image_sync


def png_bytes(size=(4, 3)) -> bytes:
    """Encode a small solid-colour PNG."""
    buffer = BytesIO()
    Image.new("RGB", size, color=(255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


class TestDecodeImageSync:
    """Test synchronous decoding."""

    def test_decode_bytes(self):
        image = decode_image_sync(png_bytes())

        assert image.size == (4, 3)

    def test_decode_path(self, tmp_path):
        path = tmp_path / "avatar.png"
        path.write_bytes(png_bytes((2, 2)))

        image = decode_image_sync(path)

        assert image.size == (2, 2)

    def test_invalid_data_raises(self):
        with pytest.raises(UnidentifiedImageError):
            decode_image_sync(b"not an image")

    def test_unsupported_source_raises(self):
        with pytest.raises(TypeError):
            decode_image_sync(42)


class TestDecodeImageAsync:
    """Test the async wrapper used by the form controller."""

    @pytest.mark.asyncio
    async def test_decode_bytes(self):
        image = await decode_image(png_bytes())

        assert image.size == (4, 3)

    @pytest.mark.asyncio
    async def test_controller_integration(self):
        """Test the default decoder through FormController."""
        from profile_card.form_controller import FormController

        controller = FormController()

        assert await controller.select_avatar(png_bytes()) is True
        assert controller.profile.avatar_image.size == (4, 3)

        assert await controller.select_avatar(b"garbage") is False
        assert controller.profile.avatar_image.size == (4, 3)
