# edgeblog/services/blob_store.py
import logging
from collections import namedtuple

import cloudinary
import cloudinary.uploader

from edgeblog.errors import UpstreamFailure

logger = logging.getLogger(__name__)

StoredBlob = namedtuple("StoredBlob", ["url", "key"])


class BlobStore:
    """
    Almacén de imágenes sobre Cloudinary.

    Se crea una sola vez en extensions.py y se enlaza con init_app();
    queda disponible en app.extensions["blob_store"].
    """

    def __init__(self, app=None):
        self.folder = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        cloudinary.config(
            cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
            api_key=app.config.get("CLOUDINARY_API_KEY"),
            api_secret=app.config.get("CLOUDINARY_API_SECRET"),
            secure=True,
        )
        self.folder = app.config.get("BLOB_FOLDER")
        app.extensions["blob_store"] = self

    def put(self, key, data):
        """Sube `data` bajo `key` ("nombre.ext") y devuelve StoredBlob(url, key)."""
        public_id, _, file_format = key.rpartition(".")
        options = {
            "public_id": public_id or key,
            "folder": self.folder,
            "resource_type": "image",
            "overwrite": False,
        }
        if public_id:
            options["format"] = file_format

        try:
            result = cloudinary.uploader.upload(data, **options)
        except Exception as e:
            logger.error("Cloudinary upload failed for %s: %s", key, e)
            raise UpstreamFailure("Image upload failed. Please try again later.") from e

        url = result.get("secure_url")
        if not url:
            logger.error("Cloudinary returned no URL for %s: %s", key, result)
            raise UpstreamFailure("Image upload failed. Please try again later.")

        return StoredBlob(url=url, key=result.get("public_id", public_id or key))

    def delete(self, key):
        try:
            result = cloudinary.uploader.destroy(key, resource_type="image")
        except Exception as e:
            raise UpstreamFailure(f"Could not delete blob {key}.") from e

        if result.get("result") not in ("ok", "not found"):
            raise UpstreamFailure(f"Could not delete blob {key}: {result.get('result')}")
