import cloudinary
import cloudinary.uploader
import cloudinary.utils
import re
import os
import time
import tempfile
import logging
import aiofiles
from fastapi import UploadFile
from typing import Optional
from . import config

logger = logging.getLogger(__name__)

FILE_TYPE_PRODUCT_IMAGE = "product_image"
FILE_TYPE_PREVIEW = "preview"
FILE_TYPE_DIGITAL_DOWNLOAD = "digital_download"
FILE_TYPES = (FILE_TYPE_PRODUCT_IMAGE, FILE_TYPE_PREVIEW, FILE_TYPE_DIGITAL_DOWNLOAD)

IMAGE_FORMATS = {"jpg", "jpeg", "png", "gif", "webp", "bmp", "svg", "tiff"}


def get_cloudinary_config():
    cloudinary.config(
        cloud_name=config.CLOUDINARY_CLOUD_NAME,
        api_key=config.CLOUDINARY_API_KEY,
        api_secret=config.CLOUDINARY_API_SECRET,
        secure=True
    )
    return cloudinary.config()


get_cloudinary_config()


def folder_for_file_type(file_type: str) -> str:
    """Map a product file type onto its storage folder (one folder per purpose)."""
    folders = {
        FILE_TYPE_PRODUCT_IMAGE: config.CLOUDINARY_IMAGES_FOLDER,
        FILE_TYPE_PREVIEW: config.CLOUDINARY_PREVIEWS_FOLDER,
        FILE_TYPE_DIGITAL_DOWNLOAD: config.CLOUDINARY_DIGITAL_FOLDER,
    }
    key = (file_type or "").lower()
    if key not in folders:
        raise ValueError(f"Invalid file type: {file_type}")
    return folders[key]


def delivery_type_for_file_type(file_type: str) -> str:
    # Digital downloads are only reachable through signed URLs
    return "authenticated" if (file_type or "").lower() == FILE_TYPE_DIGITAL_DOWNLOAD else "upload"


def resource_type_for_format(file_format: Optional[str]) -> str:
    return "image" if (file_format or "").lower() in IMAGE_FORMATS else "raw"


def extract_file_format(file_key: Optional[str]) -> str:
    """Return the lower-cased extension of a file key, or 'unknown'."""
    if not file_key or "." not in file_key:
        return "unknown"
    return file_key.rsplit(".", 1)[1].lower()


def is_allowed_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return content_type.strip().lower() in config.FILE_UPLOAD_ALLOWED_TYPES


async def upload_file(file: UploadFile, file_type: str) -> dict:
    """
    Upload a product file into the folder matching its type.

    Args:
        file (UploadFile): the uploaded file
        file_type (str): product_image, preview or digital_download

    Returns:
        dict: public_id, format, bytes and resource_type of the stored asset

    Raises:
        ValueError: on an invalid type, a disallowed content type, an oversized
        file or a failed upload
    """
    folder = folder_for_file_type(file_type)

    if not is_allowed_content_type(file.content_type):
        raise ValueError(f"File type not allowed: {file.content_type}")

    content = await file.read()
    if len(content) > config.FILE_UPLOAD_MAX_SIZE:
        raise ValueError(f"File too large. Maximum size is {config.FILE_UPLOAD_MAX_SIZE} bytes")
    if not content:
        raise ValueError("File is empty")

    safe_filename = re.sub(r'[^\w\-\.]', '-', file.filename or "upload")
    file_format = extract_file_format(safe_filename)
    resource_type = resource_type_for_format(file_format)

    temp_file = tempfile.NamedTemporaryFile(delete=False)
    temp_file.close()
    try:
        async with aiofiles.open(temp_file.name, 'wb') as out_file:
            await out_file.write(content)

        get_cloudinary_config()
        try:
            logger.info(f"Uploading {safe_filename} ({len(content)} bytes) to folder {folder}")
            upload_result = cloudinary.uploader.upload(
                temp_file.name,
                folder=folder,
                public_id=os.path.splitext(safe_filename)[0],
                resource_type=resource_type,
                type=delivery_type_for_file_type(file_type),
                unique_filename=True,
                overwrite=False
            )
        except Exception as e:
            logger.error(f"Error uploading to Cloudinary: {str(e)}")
            raise ValueError(f"Upload failed: {str(e)}")

        logger.info(f"Upload successful: {upload_result.get('public_id', 'unknown')}")
        return {
            "public_id": upload_result["public_id"],
            "format": upload_result.get("format") or file_format,
            "bytes": upload_result.get("bytes", len(content)),
            "resource_type": upload_result.get("resource_type", resource_type),
        }
    finally:
        try:
            os.unlink(temp_file.name)
        except OSError:
            logger.warning(f"Could not remove temporary file {temp_file.name}")


def get_public_url(file_key: str, file_type: str, file_format: Optional[str] = None) -> Optional[str]:
    """Public URL for images and previews; digital downloads have none."""
    if (file_type or "").lower() == FILE_TYPE_DIGITAL_DOWNLOAD:
        return None
    if file_key.startswith("http://") or file_key.startswith("https://"):
        return file_key
    try:
        url, _ = cloudinary.utils.cloudinary_url(
            file_key,
            resource_type=resource_type_for_format(file_format),
            type="upload",
            secure=True
        )
    except ValueError as e:
        # Raised when no cloud name is configured
        logger.warning(f"Cannot build public URL for {file_key}: {str(e)}")
        return None
    return url


def generate_signed_url(file_key: str, file_type: str, file_format: Optional[str] = None,
                        expires_in: Optional[int] = None) -> str:
    """Short-lived signed download URL, using the delivery type the file was stored with."""
    expires_in = expires_in or config.SIGNED_URL_EXPIRE_SECONDS
    get_cloudinary_config()
    return cloudinary.utils.private_download_url(
        file_key,
        file_format if file_format and file_format != "unknown" else "",
        resource_type=resource_type_for_format(file_format),
        type=delivery_type_for_file_type(file_type),
        expires_at=int(time.time()) + expires_in,
        attachment=True
    )


async def delete_file(file_key: str, file_type: str, file_format: Optional[str] = None) -> dict:
    result = cloudinary.uploader.destroy(
        file_key,
        resource_type=resource_type_for_format(file_format),
        type=delivery_type_for_file_type(file_type),
        invalidate=True
    )
    return {
        "public_id": file_key,
        "result": result.get("result", "unknown"),
        "status": "success" if result.get("result") == "ok" else "error"
    }
