from abc import ABC, abstractmethod
from typing import List
from core.camera import Camera
from core.image import ImageSink
from core.scene import Scene, RenderSettings


class BaseRenderer(ABC):
    """Base class every renderer implements."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def render(self, scene: Scene, camera: Camera, settings: RenderSettings, sink: ImageSink) -> None:
        """
        Render the scene into ``sink``.

        ``sink`` is already open. Implementations call ``sink.write_row`` once
        per image row, geometric top row (screen ``y = n - 1``) first, each row
        holding ``n`` averaged colors left to right. Closing the sink is the
        caller's job.
        """
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        pass

    def get_name(self) -> str:
        return self.name

    def supports(self, feature: str) -> bool:
        return feature in self.get_capabilities()


class RendererFactory:
    _renderers = {}

    @classmethod
    def register(cls, name: str, renderer_class):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._renderers.keys())
