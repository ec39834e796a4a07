# skyline_gen/export/writer.py
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..canvas import Canvas


def _name(exp: dict, key: str, default: str) -> str:
    v = exp.get(key)
    return v if isinstance(v, str) and v.strip() else default


def write_text(cv: Canvas, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="\n" keeps the rows LF-terminated on every platform
    with path.open("w", encoding="utf-8", newline="\n") as f:
        cv.print(f)
    return path


def preview_image(cv: Canvas, cell_w: int = 6, cell_h: int = 11) -> Image.Image:
    """Rasterize the grid as black glyphs on white, one fixed cell per character."""
    img = Image.new("L", (max(1, cv.W * cell_w), max(1, cv.H * cell_h)), 255)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    for r, line in enumerate(cv.to_lines()):
        for c, ch in enumerate(line):
            if ch != " ":
                draw.text((c * cell_w, r * cell_h), ch, fill=0, font=font)
    return img


def save_preview(cv: Canvas, path, exp: dict | None = None) -> Path:
    exp = exp or {}
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    prev = preview_image(cv, int(exp.get("cell_w", 6)), int(exp.get("cell_h", 11)))
    preview_max_dim = int(exp.get("preview_max_dim", 2048))
    # downscale prior to saving
    w, h = prev.size
    if max(w, h) > preview_max_dim:
        scale = preview_max_dim / float(max(w, h))
        nw, nh = round(w * scale), round(h * scale)
        prev = prev.resize((max(1, nw), max(1, nh)))
    prev.save(path)
    return path


def save_all(conf: dict, cv: Canvas) -> dict[str, Path]:
    out_dir = Path(conf.get("output_dir", "output"))
    out_dir.mkdir(parents=True, exist_ok=True)

    exp = conf.get("export", {})
    written = {"text": write_text(cv, out_dir / _name(exp, "text_file", "skyline.txt"))}
    if exp.get("preview_png"):
        written["preview"] = save_preview(cv, out_dir / _name(exp, "preview_png", "preview.png"), exp)
    return written
