"""Command-line interface for map generation."""

import argparse
import logging
import time
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError


def _output_path(base: Path, index: int, count: int) -> Path:
    """Suffix the output name with the map index when producing several maps."""
    if count == 1:
        return base
    return base.with_name(f"{base.stem}_{index}{base.suffix}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for map generation."""
    parser = argparse.ArgumentParser(
        description="Generate procedural island maps classified into biomes"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a TOML config file (optional)",
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Map width (default: 2048)"
    )
    parser.add_argument(
        "--height", type=int, default=None, help="Map height (default: 2048)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the map seed source (default: random)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output PNG path (default: output.png)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of maps to generate (default: 1)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure structlog
    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .config import MapConfig, load_config
    from .generator import MapGenerator
    from .render import save_image

    try:
        if args.config:
            config = load_config(Path(args.config))
            logger.info("config_loaded", path=args.config)
        else:
            config = MapConfig()

        # Apply CLI overrides
        overrides = {
            "width": args.width,
            "height": args.height,
            "seed": args.seed,
            "output": args.output,
        }
        updates = {key: value for key, value in overrides.items() if value is not None}
        config = MapConfig.model_validate(config.model_dump() | updates)
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("config_invalid", error=str(e))
        raise SystemExit(1)

    if args.count < 1:
        logger.error("invalid_count", count=args.count)
        raise SystemExit(1)

    output_path = Path(config.output)

    print(f"Generating {config.width}x{config.height} map(s), count {args.count}")
    print("Generating gradient...")
    generator = MapGenerator(config)
    print("DONE")

    for index in range(args.count):
        print("Generating maps...")
        start_time = time.time()
        result = generator.regenerate()
        gen_time = time.time() - start_time
        print(f"DONE in {gen_time:.1f}s")

        print("Generating image...")
        path = _output_path(output_path, index, args.count)
        save_image(result.image, path)
        print(f"Saved to {path}")


if __name__ == "__main__":
    main()
