from typing import Dict, List, Optional, Tuple
import base64
import html
import io
import json
from pathlib import Path
from PIL import Image, ImageColor, ImageDraw

TEMPLATE_PATH = Path(__file__).parent / 'html_template.j2'

WALL_RGB = (0, 0, 0)
GRID_RGB = (200, 200, 200)
ENTRY_RGB = (0, 255, 0)
EXIT_RGB = (255, 0, 0)


def _render(template: str, context: Dict[str, str]) -> str:
    out = template
    for k, v in context.items():
        out = out.replace(f"%%{k}%%", v)
    return out


def render_maze_image(grid, path: Optional[List[Tuple[int, int]]] = None, cell_px: int = 24,
                      color: str = 'blue', width: int = 10) -> Image.Image:
    """Draw walls, entry/exit markers and optionally a path as a polyline.

    width is the highlight weight; 10 draws a line a quarter of a cell wide.
    """
    h, w = grid.rows, grid.cols
    img = Image.new('RGB', (w*cell_px, h*cell_px), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    for r in range(h):
        for c in range(w):
            x0, y0 = c*cell_px, r*cell_px
            x1, y1 = x0+cell_px-1, y0+cell_px-1
            if not grid[r, c]:
                draw.rectangle([x0, y0, x1, y1], fill=WALL_RGB)
            else:
                draw.rectangle([x0, y0, x1, y1], outline=GRID_RGB)
    for (r, c), rgb in ((grid.entry, ENTRY_RGB), (grid.exit, EXIT_RGB)):
        x, y = c*cell_px, r*cell_px
        draw.rectangle([x+2, y+2, x+cell_px-3, y+cell_px-3], fill=rgb)
    if path:
        rgb = ImageColor.getrgb(color)
        line_px = max(1, cell_px * width // 40)
        centers = [(c*cell_px + cell_px//2, r*cell_px + cell_px//2) for r, c in path]
        if len(centers) == 1:
            cx, cy = centers[0]
            rad = max(1, line_px//2)
            draw.ellipse([cx-rad, cy-rad, cx+rad, cy+rad], fill=rgb)
        else:
            draw.line(centers, fill=rgb, width=line_px)
    return img


def image_data_uri(img: Image.Image) -> str:
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('utf-8')
    return f"data:image/png;base64,{b64}"


def generate_report(output_path: str, name: str, grid, path: List[Tuple[int, int]], result: Dict,
                    failure_snapshot: str = '', cell_px: int = 24) -> Path:
    template = TEMPLATE_PATH.read_text(encoding='utf-8')
    img = render_maze_image(grid, path, cell_px=cell_px)
    ctx = {
        'NAME': html.escape(name),
        'SIZE': f"{grid.rows}x{grid.cols}",
        'STATUS': 'valid' if result.get('ok') else 'invalid',
        'LENGTH': str(result.get('length', '')),
        'OPTIMAL': str(result.get('optimal', '')),
        'OVERLAP': f"{float(result.get('overlap') or 0.0):.3f}",
        'PATH': json.dumps([[int(r), int(c)] for r, c in path]),
        'FAIL': html.escape(failure_snapshot),
        'IMG_SRC': image_data_uri(img),
    }
    rendered = _render(template, ctx)
    out = Path(output_path)
    out.write_text(rendered, encoding='utf-8')
    return out
