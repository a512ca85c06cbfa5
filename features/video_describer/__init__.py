"""
Video Describer feature — textual descriptions for video content.
"""

from features.video_describer.controller import VideoDescriberController

__all__ = ["VideoDescriberController"]
