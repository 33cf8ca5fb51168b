import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional
from core.math import Vec3
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.image import ImageSink
from renderers.base_renderer import BaseRenderer, RendererFactory
from renderers.cpu_renderer import render_row

# per-process copies, set once by the pool initializer
_worker_scene = None
_worker_camera = None
_worker_ss = 1


def _init_worker(scene: Scene, camera: Camera, ss: int):
    global _worker_scene, _worker_camera, _worker_ss
    _worker_scene = scene
    _worker_camera = camera
    _worker_ss = ss


def _render_row(y: int) -> List[Vec3]:
    return render_row(_worker_scene, _worker_camera, y, _worker_ss)


class ParallelCPURenderer(BaseRenderer):
    """
    Distributes image rows over worker processes.

    The scene tree is never modified after it is built, so every worker gets
    its own pickled copy and rows can be traced independently. Rows come back
    in submission order, which keeps the output identical to CPURenderer.
    """

    def __init__(self, workers: Optional[int] = None):
        super().__init__("parallel_cpu_raytracer")
        self.workers = workers or os.cpu_count() or 1

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "shadows",
            "reflection",
            "multiple_lights",
            "supersampling",
            "bounding_spheres",
            "multiprocessing"
        ]

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings, sink: ImageSink) -> None:
        start_time = time.time()
        n = camera.size

        print(f"Parallel CPU rendering: {n}x{n}, {settings.supersample}x{settings.supersample} "
              f"samples per pixel, {self.workers} workers")

        rows = range(n - 1, -1, -1)
        with ProcessPoolExecutor(max_workers=self.workers,
                                 initializer=_init_worker,
                                 initargs=(scene, camera, settings.supersample)) as executor:
            for y, row in zip(rows, executor.map(_render_row, rows, chunksize=4)):
                sink.write_row(row)

                if y % 50 == 0:
                    print(f"Rows remaining: {y}")

        elapsed = time.time() - start_time
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        print(f"Parallel CPU rendering finished: {minutes}m {seconds:.2f}s")


RendererFactory.register("parallel_cpu_raytracer", ParallelCPURenderer)
