import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict
from tqdm import tqdm

from common.config_loader import as_bool, load_config
from common.logging_config import configure_logging
from common.pdf_export import export_summary_pdf
from maze_solver.cli import run_single, summarize

logger = logging.getLogger('bench')


def run_directory(cfg: Dict, mazes_dir: Path, outdir: Path) -> Dict:
    outdir.mkdir(parents=True, exist_ok=True)
    items = sorted(mazes_dir.glob('*.maze'))
    workers = int(cfg.get('workers') or max(1, min(len(items) or 1, os.cpu_count() or 4)))
    symbols = cfg.get('maze_symbols') or {}

    def _task(mp: Path):
        soln = mp.with_suffix('.soln')
        return run_single(
            mp, outdir, soln if soln.exists() else None,
            global_visited=as_bool(cfg.get('global_visited')),
            record_frames=as_bool(cfg.get('record_frames')),
            max_frames=int(cfg.get('max_frames') or 200),
            cell_px=int(cfg.get('cell_px') or 24),
            wall=symbols.get('wall', '@'), corridor=symbols.get('corridor', '-'),
        )

    results = []
    img_paths = []
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = {ex.submit(_task, mp): mp for mp in items}
        pbar = tqdm(total=len(items), desc='Mazes')
        for fut in as_completed(futures):
            try:
                r = fut.result()
                results.append(r)
                img_paths.append(r['image'])
            except Exception as e:
                logger.error('failed on %s: %s', futures[fut].name, e)
                results.append({'maze': futures[fut].name, 'error': str(e)})
            pbar.update(1)
        pbar.close()

    results.sort(key=lambda r: r.get('maze', ''))
    summary = summarize(results)
    (outdir / 'summary.json').write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')
    export_summary_pdf(str(outdir / 'summary.pdf'), 'Maze Solver Summary', summary, image_paths=sorted(img_paths))
    return summary


def main():
    cfg = load_config()
    configure_logging(cfg)
    outdir = Path(cfg.get('output_dir') or 'outputs')
    mazes_dir = Path(cfg.get('mazes_dir') or 'mazes')
    if not mazes_dir.is_dir():
        raise SystemExit(f'mazes_dir not found: {mazes_dir}')
    print('Solving mazes under', mazes_dir)
    summary = run_directory(cfg, mazes_dir, outdir)
    overview = {
        'mazes': len(summary['items']),
        'solved': summary['solved'],
        'supplied_valid': sum(1 for r in summary['items'] if r.get('solution', {}).get('ok')),
    }
    (outdir / 'overview.json').write_text(json.dumps(overview, ensure_ascii=False, indent=2), encoding='utf-8')
    print('Done. Summaries saved to', outdir)

if __name__ == '__main__':
    main()
