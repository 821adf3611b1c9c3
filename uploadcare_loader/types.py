from typing import Dict
from typing_extensions import NotRequired, TypedDict

class ImageLoaderProps(TypedDict):
    src: str
    width: int
    quality: NotRequired[int]

# Ordered transformation parameters, e.g. {'format': 'auto', 'resize': '500x'}
TransformationParams = Dict[str, str]
