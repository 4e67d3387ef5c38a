"""Generate static images for the documentation."""

from pathlib import Path

import matplotlib.pyplot as plt

from geodome import (
    CHAKRA_COLOURS,
    DomeDesign,
    DomeVariant,
    RenderStyle,
    ViewState,
    palette_from_cmap,
)

OUT = Path(__file__).resolve().parent


def chakra_design(frequency: int = 3) -> DomeDesign:
    """A 20-unit icosahedral dome in all seven chakra colours."""
    return DomeDesign.from_diameter(
        20.0,
        frequency=frequency,
        palette=list(CHAKRA_COLOURS.values()),
        title=f"{frequency}V icosahedron",
    )


def variant_panel(path: Path) -> None:
    """Side-by-side comparison of the three variants at frequency 4."""
    fig, axes = plt.subplots(1, 3, figsize=(12, 4), dpi=150)
    for ax, variant in zip(axes, DomeVariant):
        design = DomeDesign.from_diameter(
            20.0, frequency=4, variant=variant,
            palette=palette_from_cmap("viridis", 4),
            title=variant.value.replace("_", " "),
        )
        design.view = ViewState().look_along([1.0, 0.4, 0.6])
        design.render_mpl(ax=ax)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


def generate_docs_images() -> None:
    # Hero image
    hero = chakra_design(frequency=4)
    hero.render_mpl(OUT / "hero.svg", show=False, figsize=(6, 6))
    print(f"  wrote {OUT / 'hero.svg'}")

    # Frequencies 2 to 6 for the user guide
    for frequency in range(2, 7):
        path = OUT / f"frequency_{frequency}.svg"
        chakra_design(frequency).render_mpl(
            path, show=False, figsize=(4, 4),
        )
        print(f"  wrote {path}")

    variant_panel(OUT / "variants.svg")
    print(f"  wrote {OUT / 'variants.svg'}")

    # Style variations
    design = chakra_design(frequency=3)
    design.render_mpl(
        OUT / "wireframe.svg", show=False, figsize=(4, 4), show_faces=False,
    )
    print(f"  wrote {OUT / 'wireframe.svg'}")

    style = RenderStyle(shading=0.0, edge_colour="white", edge_width=1.0)
    design.render_mpl(
        OUT / "flat.svg", show=False, figsize=(4, 4), style=style,
    )
    print(f"  wrote {OUT / 'flat.svg'}")


if __name__ == "__main__":
    generate_docs_images()
