from typing import Iterable, Iterator, List, Optional

from raycaster.common import Light
from raycaster.primitives import Primitive, Sphere


class Scene:
    """
    Ordered primitives and the single point light that shades them.

    The scene keeps its own list; callers adding objects hand them over.
    Hit records returned during a frame only borrow references into it.
    """

    def __init__(self, light: Light, objects: Optional[Iterable[Primitive]] = None):
        self.light = light
        self.objects: List[Primitive] = list(objects) if objects is not None else []

    def add(self, obj: Primitive) -> Primitive:
        self.objects.append(obj)
        return obj

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)


def default_scene() -> Scene:
    scene = Scene(Light(position=(0.0, -2.0, 0.0), color=(255.0, 255.0, 255.0)))

    scene.add(Sphere(center=(0.5, 0.8, -8.0), radius=0.5, color=(100.0, 100.0, 0.0)))
    scene.add(Sphere(center=(1.9, 0.3, -9.8), radius=0.5, color=(0.0, 100.0, 0.0)))
    scene.add(Sphere(center=(0.9, 0.8, -7.5), radius=0.5, color=(0.0, 100.0, 55.0)))

    return scene
