import math
from dataclasses import dataclass

from raycaster.common import ConfigurationError, HitRecord, Ray
from raycaster.vector import Vector3, as_vec, dot


class Primitive:
    """
    Anything a ray can hit. Subclasses provide intersection and the surface
    normal; the intersector and shader only go through this interface.
    """
    color: Vector3

    def intersect(self, ray: Ray) -> HitRecord:
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal_at() must be implemented by subclasses.")


@dataclass(eq=False)
class Sphere(Primitive):
    center: Vector3
    radius: float
    color: Vector3

    def __post_init__(self):
        if not self.radius > 0:
            raise ConfigurationError(f"sphere radius must be positive, got {self.radius}")
        self.center = as_vec(self.center)
        self.color = as_vec(self.color)

    def intersect(self, ray: Ray) -> HitRecord:
        # -(l . (o - c)) +- sqrt((l . (o - c))^2 - |o - c|^2 + r^2), |l| = 1
        oc = ray.origin - self.center
        b = dot(ray.direction, oc)
        discriminant = b * b - dot(oc, oc) + self.radius * self.radius

        if discriminant < 0:
            return HitRecord.miss()

        # only the entry root; a ray starting inside the sphere misses it
        t = -b - math.sqrt(discriminant)
        if t < 0:
            return HitRecord.miss()

        return HitRecord(point=ray.at(t), hit=True, distance=t, object=self)

    def normal_at(self, point: Vector3) -> Vector3:
        return point - self.center
