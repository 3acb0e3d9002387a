from raycaster.common import HitRecord, Ray
from raycaster.scene import Scene


def find_closest_hit(scene: Scene, ray: Ray) -> HitRecord:
    # Find the nearest point along the ray; on equal distances the object
    # added to the scene first is kept
    closest = HitRecord.miss()
    for obj in scene:
        hit = obj.intersect(ray)
        if hit.hit and hit.distance < closest.distance:
            closest = hit
            closest.object = obj

    return closest
