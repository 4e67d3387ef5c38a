"""Open the interactive viewer, then save the result.

Use [ and ] to change the frequency, v to switch variant, and s / S to
resize.  Press h for the full list of keys.
"""

from pathlib import Path

from geodome import CHAKRA_COLOURS, DomeDesign

OUTPUT = Path(__file__).resolve().parent / "dome_interactive.svg"


def main():
    design = DomeDesign(palette=list(CHAKRA_COLOURS.values())[:4])
    design, view, style = design.render_mpl_interactive()
    print(
        f"Final design: {design.variant.value}, frequency {design.frequency}, "
        f"diameter {design.diameter:g}"
    )
    design.render_mpl(OUTPUT, style=style)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
