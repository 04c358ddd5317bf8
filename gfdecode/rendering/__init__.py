from .renderer import bitmap_to_image, bitmap_to_text

__all__ = ["bitmap_to_image", "bitmap_to_text"]
