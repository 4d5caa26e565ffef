from PIL import Image, UnidentifiedImageError
import io
import logging

from app.exceptions import ClientInputError, ErrorCode

logger = logging.getLogger(__name__)


class ImageService:
    @staticmethod
    def inspect(image_bytes: bytes) -> dict:
        """
        Check that the upload decodes as an image and report what it is.
        Pixels are not analyzed beyond that.
        """
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.verify()
            # verify() leaves the image unusable, reopen for the header fields
            with Image.open(io.BytesIO(image_bytes)) as image:
                w, h = image.size
                info = {"width": w, "height": h, "format": image.format, "mode": image.mode}
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            logger.warning(f"Rejected undecodable upload: {e}")
            raise ClientInputError(ErrorCode.UNREADABLE_IMAGE) from e

        logger.info(f"🖼️  {info['format']} | {w}×{h} | {info['mode']}")
        return info


image_service = ImageService()
