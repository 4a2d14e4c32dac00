from .image_card import ImageCard
from .image_grid import ImageGrid
from .title_bar import TitleBar

__all__ = ["ImageCard", "ImageGrid", "TitleBar"]
