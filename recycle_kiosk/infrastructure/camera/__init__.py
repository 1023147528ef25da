"""OpenCV Camera Adapter."""

from recycle_kiosk.infrastructure.camera.opencv_camera import OpenCVCamera, OpenCVVideoStream

__all__ = ["OpenCVCamera", "OpenCVVideoStream"]
