import sys
import time
import argparse
from core.math import Vec3
from core.image import ImageSink
from core.scene import RenderSettings, DEFAULT_LIGHT
from scene_builders.sphereflake_builder import SphereFlakeBuilder, sphere_count
from renderers.base_renderer import RendererFactory

# renderer modules register themselves on import
import renderers.cpu_renderer
import renderers.parallel_renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Sphere-flake ray tracer')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='renderer to use')
    parser.add_argument('--size', '-n', type=int, default=512,
                        help='width and height of the square image')
    parser.add_argument('--level', '-l', type=int, default=9,
                        help='sphere-flake recursion depth')
    parser.add_argument('--supersample', '-s', type=int, default=4,
                        help='rays per pixel along each axis')
    parser.add_argument('--light', action='append', nargs=3, type=float, metavar=('X', 'Y', 'Z'),
                        help='direction light travels in; repeat for more lights')
    parser.add_argument('--grayscale', action='store_true',
                        help='write a single-channel PGM instead of a PPM')
    parser.add_argument('--output', '-o', default=None,
                        help='output file (default image.ppm, or image.pgm with --grayscale)')
    parser.add_argument('--workers', type=int, default=None,
                        help='worker processes for parallel_cpu_raytracer')
    return parser


def settings_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RenderSettings:
    lights = tuple(Vec3(*light) for light in args.light) if args.light else (DEFAULT_LIGHT,)
    try:
        return RenderSettings(
            size=args.size,
            level=args.level,
            supersample=args.supersample,
            lights=lights,
            grayscale=args.grayscale,
            output=args.output
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(parser, args)

    print(f"Building sphere-flake: level {settings.level}, {sphere_count(settings.level)} spheres, "
          f"{len(settings.lights)} light(s)")
    build_start = time.time()
    scene_builder = SphereFlakeBuilder()
    scene = scene_builder.build_scene(settings)
    camera = scene_builder.create_camera(settings.size)
    print(f"Scene built in {time.time() - build_start:.2f}s")

    kwargs = {}
    if args.renderer == 'parallel_cpu_raytracer':
        kwargs['workers'] = args.workers
    renderer = RendererFactory.create(args.renderer, **kwargs)
    print(f"Renderer: {renderer.get_name()} ({', '.join(renderer.get_capabilities())})")

    start_time = time.time()
    try:
        with ImageSink(settings.output, settings.size, settings.grayscale) as sink:
            renderer.render(scene, camera, settings, sink)
    except OSError as e:
        print(f"Cannot write {settings.output}: {e}", file=sys.stderr)
        return 1
    print(f"Image saved: {settings.output}")

    elapsed = time.time() - start_time
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    print(f"Total time: {minutes}m {seconds:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
