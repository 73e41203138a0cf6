from google.cloud import storage
from google.oauth2 import service_account
from PIL import Image, UnidentifiedImageError
import io
import os
import logging
from datetime import datetime
import uuid
from typing import Optional, Tuple
from fastapi import UploadFile
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class StorageService:
    def __init__(self):
        credentials_path = os.getenv("GCS_CREDENTIALS_PATH")
        self.bucket_name = os.getenv("GCS_BUCKET_NAME")
        self.cdn_base_url = os.getenv("CDN_BASE_URL")

        if not credentials_path or not self.bucket_name or not self.cdn_base_url:
            raise ValueError("GCS configuration missing in .env file")

        # Make path absolute if it's relative
        if not os.path.isabs(credentials_path):
            credentials_path = os.path.join(os.getcwd(), credentials_path)

        if not os.path.exists(credentials_path):
            raise ValueError(f"GCS credentials file not found at: {credentials_path}")

        credentials = service_account.Credentials.from_service_account_file(
            credentials_path
        )
        self.client = storage.Client(credentials=credentials)
        self.bucket = self.client.bucket(self.bucket_name)

    def _generate_filename(self, original_filename: str, folder: str) -> str:
        """Generate unique filename keeping the original name as public id"""
        public_id = os.path.splitext(os.path.basename(original_filename or ""))[0] or "upload"
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        unique_id = str(uuid.uuid4())[:8]
        return f"{folder}/{public_id}_{timestamp}_{unique_id}.jpg"

    def _optimize_image(self, file_content: bytes, max_size: Tuple[int, int] = (1024, 1024)) -> bytes:
        """Optimize and compress image"""
        image = Image.open(io.BytesIO(file_content))

        # Convert RGBA to RGB if needed
        if image.mode == 'RGBA':
            background = Image.new('RGB', image.size, (255, 255, 255))
            background.paste(image, mask=image.split()[3])
            image = background
        elif image.mode != 'RGB':
            image = image.convert('RGB')

        # Resize if larger than max_size
        image.thumbnail(max_size, Image.Resampling.LANCZOS)

        # Save optimized image
        output = io.BytesIO()
        image.save(output, format='JPEG', quality=85, optimize=True)
        return output.getvalue()

    async def upload_file(self, file: UploadFile, folder: str) -> str:
        """
        Upload an image to GCS

        Args:
            file: uploaded file (FastAPI UploadFile or GraphQL Upload)
            folder: Folder name (dynasty/admin/avatar, dynasty/product/image, ...)

        Returns:
            Public URL of the uploaded image
        """
        content = await file.read()
        if not content:
            raise ValueError("Uploaded file is empty")

        try:
            optimized_content = self._optimize_image(content)
        except UnidentifiedImageError:
            raise ValueError("Uploaded file is not a valid image")

        filename = self._generate_filename(file.filename, folder)

        blob = self.bucket.blob(filename)
        blob.upload_from_string(
            optimized_content,
            content_type='image/jpeg'
        )
        blob.make_public()

        url = f"{self.cdn_base_url}/{filename}"
        logger.info(f"Image uploaded successfully: {url}")
        return url

    def _blob_name(self, image_url: str) -> Optional[str]:
        """Object name inside the bucket, or None for URLs this bucket does not serve"""
        prefix = f"{self.cdn_base_url}/"
        if not image_url or not image_url.startswith(prefix):
            return None
        return image_url[len(prefix):]

    def delete_image(self, image_url: str) -> bool:
        """Delete an uploaded image; default avatars and foreign URLs are ignored"""
        blob_name = self._blob_name(image_url)
        if blob_name is None:
            return False

        try:
            blob = self.bucket.blob(blob_name)
            if blob.exists():
                blob.delete()
            return True
        except Exception as e:
            logger.error(f"Failed to delete image: {str(e)}")
            return False


# Singleton instance - initialized when first imported
try:
    storage_service = StorageService()
except Exception as e:
    logger.warning(f"Failed to initialize StorageService: {str(e)}")
    logger.warning("Make sure GCS_CREDENTIALS_PATH, GCS_BUCKET_NAME, and CDN_BASE_URL are set in .env file")
    storage_service = None
