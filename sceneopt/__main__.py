import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from sceneopt import (
    BatchDrawOp,
    BatchingConfig,
    ValidationError,
    build_display_list,
    count_drawn_primitives,
    generate_svg_document,
    scatter_scene,
    validate_context,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_radii(value: str) -> Sequence[float]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if not parts:
        raise argparse.ArgumentTypeError("at least one radius is required")
    try:
        return tuple(float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid radius list {value!r}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Optimize and render a scatter scene")
    parser.add_argument("--count", type=int, default=1000, help="Number of points (default: 1000)")
    parser.add_argument("--colors", type=int, default=3, help="Number of color categories (default: 3)")
    parser.add_argument(
        "--radii",
        type=_parse_radii,
        default=(0.8,),
        help="Comma separated radii cycled over categories (default: 0.8)",
    )
    parser.add_argument("--seed", type=int, default=123, help="Random seed (default: 123)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--no-optimize", action="store_true", help="Disable tree splitting")
    parser.add_argument("--no-batch", action="store_true", help="Disable form batching")
    parser.add_argument(
        "--filter-offsets",
        action="store_true",
        help="Drop near-duplicate offsets from batches",
    )
    parser.add_argument(
        "--group-by-hash",
        action="store_true",
        help="Group split indices by hash only (collision-prone)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=BatchingConfig.batch_length_threshold,
        help="Minimum vector length considered for splitting (default: 100)",
    )
    parser.add_argument("--svg-output-path", help="Write the rendered SVG document to the given path")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config = BatchingConfig(
        batch_length_threshold=args.threshold,
        group_by_hash=args.group_by_hash,
        filter_offsets=args.filter_offsets,
    )

    try:
        scene = scatter_scene(args.count, colors=args.colors, radii=args.radii, seed=args.seed)
        validate_context(scene)
    except (ValueError, ValidationError) as exc:
        logger.error("Invalid scene: %s", exc)
        raise SystemExit(1)

    logger.info("Built scene with %d points in %d contexts", args.count, scene.count_contexts())

    optimize = not args.no_optimize
    batch = not args.no_batch
    ops = build_display_list(scene, optimize=optimize, batch=batch, config=config)
    batches = sum(1 for op in ops if isinstance(op, BatchDrawOp))
    logger.info(
        "Display list: %d draw operations (%d batches) covering %d primitives",
        len(ops),
        batches,
        count_drawn_primitives(ops),
    )

    if args.svg_output_path:
        document = generate_svg_document(
            scene,
            200.0,
            150.0,
            optimize=optimize,
            batch=batch,
            config=config,
        )
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        logger.info("Wrote SVG document to %s", output_path)


if __name__ == "__main__":
    main()
