from .fakes import FakeCapturePort, make_frame

__all__ = ["FakeCapturePort", "make_frame"]
