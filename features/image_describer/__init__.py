"""
Image Describer feature — alt text generation for uploaded images.
"""

from features.image_describer.controller import ImageAnalyzerController

__all__ = ["ImageAnalyzerController"]
