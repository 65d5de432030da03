"""Scatter plot split into per-color batches, written to scatter.svg."""

from pathlib import Path

from sceneopt import (
    BatchDrawOp,
    build_display_list,
    generate_svg_document,
    optimize_batching,
    scatter_scene,
    validate_context,
)


def main() -> None:
    scene = scatter_scene(2000, colors=4, seed=7)
    validate_context(scene)

    points = scene.container_children[0]
    split = optimize_batching(points)
    print(f"points context: {len(points.form_children[0])} circles -> {len(split.container_children)} groups")

    ops = build_display_list(scene)
    batches = [op for op in ops if isinstance(op, BatchDrawOp)]
    print(f"display list: {len(ops)} ops, {len(batches)} batches")

    Path("scatter.svg").write_text(generate_svg_document(scene, 200.0, 150.0), encoding="utf-8")


if __name__ == "__main__":
    main()
