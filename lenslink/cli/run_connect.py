import json
from typing import Optional

import typer
from pydantic import ValidationError

from lenslink.config.loader import load_cfg
from lenslink.geometry.connectors import compute_connectors
from lenslink.schema.serialization import connectors_to_dict, load_scene, write_connectors_json
from lenslink.utils.logging import setup_logging

app = typer.Typer()

@app.command()
def run(scene: str, out: Optional[str] = typer.Option(None, help="Write connector JSON here instead of stdout.")):
    cfg = load_cfg()
    log = setup_logging(cfg.logging.level)
    try:
        sc = load_scene(scene)
    except (FileNotFoundError, ValidationError) as e:
        log.error(f"[connect] cannot load scene {scene}: {e}")
        raise typer.Exit(code=1)

    pair = compute_connectors(sc.source, sc.lens)
    if out:
        write_connectors_json(pair, out)
        log.info(f"[connect] {scene}: 2 connectors → {out}")
    else:
        typer.echo(json.dumps(connectors_to_dict(pair), indent=2))

if __name__ == "__main__":
    app()
