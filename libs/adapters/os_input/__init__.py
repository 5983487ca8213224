from .fakes import FakeInputPort, InputRecord

__all__ = ["FakeInputPort", "InputRecord"]
