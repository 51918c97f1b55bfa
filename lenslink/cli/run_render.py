import typer
from pathlib import Path
from pydantic import ValidationError

from lenslink.config.loader import load_cfg
from lenslink.imaging.magnify import magnify, open_image, to_data_url
from lenslink.render.svg import render_scene, style_from_cfg, write_svg
from lenslink.schema.serialization import load_scene
from lenslink.utils.logging import setup_logging

app = typer.Typer()

@app.command()
def run(scene: str,
        out: str = typer.Option(..., help="Output SVG path."),
        embed: bool = typer.Option(True, help="Inline the base and magnified images as data URLs.")):
    cfg = load_cfg()
    log = setup_logging(cfg.logging.level)
    try:
        sc = load_scene(scene)
    except (FileNotFoundError, ValidationError) as e:
        log.error(f"[render] cannot load scene {scene}: {e}")
        raise typer.Exit(code=1)

    image_href = magnified_href = None
    if sc.image:
        try:
            base = open_image(sc.image)
            magnified_href = to_data_url(magnify(base, sc.source, sc.lens, resample=str(cfg.magnify.resample)))
            image_href = to_data_url(base) if embed else Path(sc.image).as_uri()
        except (FileNotFoundError, ValueError) as e:
            # the overlay is still useful without the picture
            log.warning(f"[render] image skipped for {scene}: {e}")
            image_href = magnified_href = None
            sc = sc.model_copy(update={"image": None})

    svg = render_scene(sc, magnified_href=magnified_href, image_href=image_href, style=style_from_cfg(cfg))
    write_svg(svg, out)
    log.info(f"[render] {scene} → {out}")

if __name__ == "__main__":
    app()
