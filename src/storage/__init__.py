from src.storage.client import ImageStorage, category_image_path, get_storage

__all__ = ["ImageStorage", "category_image_path", "get_storage"]
