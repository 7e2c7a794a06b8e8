import argparse
import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional
from tqdm import tqdm

from common.config_loader import as_bool, load_config
from common.logging_config import configure_logging
from maze_solver.maze_core.loader import read_maze_file
from maze_solver.maze_core.solver import SolveStats, solve
from maze_solver.eval_core.parser import read_solution_file, write_solution_file
from maze_solver.eval_core.validator import Validator
from maze_solver.observers.null import NullObserver
from maze_solver.observers.recorder import FrameRecorder
from maze_solver.report.generator import generate_report, render_maze_image

logger = logging.getLogger(__name__)


def run_single(maze_path: Path, outdir: Path, solution_path: Optional[Path] = None,
               global_visited: bool = False, record_frames: bool = False, max_frames: int = 200,
               cell_px: int = 24, wall: str = '@', corridor: str = '-') -> Dict:
    grid = read_maze_file(maze_path, wall=wall, corridor=corridor)
    observer = FrameRecorder(cell_px=max(4, cell_px//2), max_frames=max_frames) if record_frames else NullObserver()
    stats = SolveStats()
    path = solve(grid, observer=observer, global_visited=global_visited, stats=stats)
    validator = Validator(grid)
    result = validator.validate(path)
    stem = maze_path.stem
    item = {
        'maze': maze_path.name,
        'size': f"{grid.rows}x{grid.cols}",
        'solver': result,
        'stats': {'dequeued': stats.dequeued, 'enqueued': stats.enqueued},
    }
    failure_snapshot = '' if result.get('ok') else result.get('error', '')
    report_path = outdir / f"report_{stem}.html"
    generate_report(str(report_path), stem, grid, path, result, failure_snapshot, cell_px=cell_px)
    item['report'] = str(report_path)
    image_path = outdir / f"{stem}.png"
    render_maze_image(grid, path, cell_px=cell_px).save(image_path)
    item['image'] = str(image_path)
    if result.get('ok'):
        item['soln'] = str(write_solution_file(outdir / f"{stem}.soln", path))
    if record_frames:
        item['frames'] = str(observer.save_gif(outdir / f"{stem}_search.gif", final_path=path))
    if solution_path is not None:
        supplied = read_solution_file(solution_path)
        item['solution'] = dict(validator.validate(supplied), file=solution_path.name)
    return item


def summarize(results) -> Dict:
    solved = sum(1 for r in results if r.get('solver', {}).get('ok'))
    return {'solved': solved, 'items': results}


def main(argv=None):
    ap = argparse.ArgumentParser(description='Solve and validate grid mazes')
    ap.add_argument('--maze', required=True, help='comma-separated maze files')
    ap.add_argument('--solution', default='', help='comma-separated solution files, matched to --maze by position')
    ap.add_argument('--workers', type=int, default=None)
    ap.add_argument('--outdir', default=None)
    ap.add_argument('--global_visited', action='store_true', help='prune cells already reached by any path')
    ap.add_argument('--frames', action='store_true', help='record search frames as an animated GIF')
    ap.add_argument('--config', default=None, help='YAML config file')
    args = ap.parse_args(argv)

    cfg = load_config(base=args.config)
    configure_logging(cfg)
    outdir = Path(args.outdir or cfg.get('output_dir') or 'outputs')
    outdir.mkdir(parents=True, exist_ok=True)
    workers = args.workers or int(cfg.get('workers') or 4)
    symbols = cfg.get('maze_symbols') or {}

    mazes = [Path(s.strip()) for s in args.maze.split(',') if s.strip()]
    solutions = [Path(s.strip()) for s in args.solution.split(',') if s.strip()]
    if len(solutions) > len(mazes):
        ap.error('more solution files than maze files')
    solutions += [None] * (len(mazes) - len(solutions))

    results = []
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = {
            ex.submit(run_single, m, outdir, s,
                      global_visited=args.global_visited or as_bool(cfg.get('global_visited')),
                      record_frames=args.frames or as_bool(cfg.get('record_frames')),
                      max_frames=int(cfg.get('max_frames') or 200),
                      cell_px=int(cfg.get('cell_px') or 24),
                      wall=symbols.get('wall', '@'), corridor=symbols.get('corridor', '-')): m
            for m, s in zip(mazes, solutions)
        }
        for f in tqdm(as_completed(futs), total=len(futs)):
            try:
                results.append(f.result())
            except Exception as e:
                logger.error('failed on %s: %s', futs[f], e)
                results.append({'maze': futs[f].name, 'error': str(e)})
    summary = summarize(results)
    (outdir / 'summary.json').write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')
    print(json.dumps(summary, ensure_ascii=False))
    return summary


if __name__ == '__main__':
    main()
