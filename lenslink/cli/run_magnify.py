from pathlib import Path

import typer
from pydantic import ValidationError

from lenslink.config.loader import load_cfg
from lenslink.imaging.magnify import magnify_file
from lenslink.schema.serialization import load_scene
from lenslink.utils.io import ensure_dir
from lenslink.utils.logging import setup_logging
from lenslink.utils.timers import timer

app = typer.Typer()

@app.command()
def run(scene: str, out: str = typer.Option(..., help="Output PNG path.")):
    cfg = load_cfg()
    log = setup_logging(cfg.logging.level)
    try:
        sc = load_scene(scene)
    except (FileNotFoundError, ValidationError) as e:
        log.error(f"[magnify] cannot load scene {scene}: {e}")
        raise typer.Exit(code=1)
    if not sc.image:
        log.error(f"[magnify] scene {scene} has no image")
        raise typer.Exit(code=1)

    try:
        with timer("magnify"):
            img = magnify_file(sc.image, sc.source, sc.lens, resample=str(cfg.magnify.resample))
    except (FileNotFoundError, ValueError) as e:
        log.error(f"[magnify] {scene}: {e}")
        raise typer.Exit(code=1)

    out_p = Path(out)
    ensure_dir(out_p.parent)
    img.save(out_p)
    log.info(f"[magnify] {scene}: {img.size[0]}x{img.size[1]} → {out_p}")

if __name__ == "__main__":
    app()
