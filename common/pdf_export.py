import logging
from typing import List, Dict
from pathlib import Path
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm

logger = logging.getLogger(__name__)


def export_summary_pdf(output_path: str, title: str, summary: Dict, image_paths: List[str] | None = None):
    p = canvas.Canvas(output_path, pagesize=A4)
    width, height = A4
    p.setFont("Helvetica-Bold", 16)
    p.drawString(2*cm, height-2*cm, title)
    p.setFont("Helvetica", 11)
    y = height - 3*cm
    items = summary.get('items') or []
    solved = summary.get('solved')
    if solved is not None:
        p.drawString(2*cm, y, f"Solved: {solved}/{len(items)}")
        y -= 0.8*cm
    for i, it in enumerate(items):
        if it.get('error'):
            line = f"[{i}] {it.get('maze', '')} error={it['error']}"
        else:
            s = it.get('solver', {})
            line = f"[{i}] {it.get('maze', '')} ok={s.get('ok')} length={s.get('length')} optimal={s.get('optimal')}"
            if 'solution' in it:
                line += f" solution_ok={it['solution'].get('ok')}"
        p.drawString(2*cm, y, line[:110])
        y -= 0.6*cm
        if y < 4*cm:
            p.showPage()
            p.setFont("Helvetica", 11)
            y = height - 3*cm
    # Add first image if provided
    if image_paths:
        img = image_paths[0]
        if img and Path(img).exists():
            p.showPage()
            p.drawString(2*cm, height-2*cm, "Sample Maze")
            p.drawImage(img, 2*cm, 4*cm, width=16*cm, preserveAspectRatio=True, mask='auto')
        else:
            logger.warning('summary image %s not found, skipping', img)
    p.save()
