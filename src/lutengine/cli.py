from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from lutengine import __version__
from lutengine.color import LUTApplication, sample_lattice
from lutengine.config import AppConfig, load_config
from lutengine.formats import load_lut
from lutengine.lattice import LatticeTable
from lutengine.utils.logging_utils import configure_logging


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lut-engine")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    inspect = sub.add_parser("inspect", help="Parse a .cube/.3dl file and describe the lattice")
    inspect.add_argument("lut", help="Path to LUT file")
    inspect.add_argument("--config", default=None, help="Optional path to YAML config")
    inspect.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

    sample = sub.add_parser("sample", help="Transform a single RGB colour through a LUT")
    sample.add_argument("lut", help="Path to LUT file")
    sample.add_argument("rgb", nargs=3, type=float, metavar=("R", "G", "B"), help="Input colour")
    sample.add_argument("--config", default=None, help="Optional path to YAML config")
    sample.add_argument("--intensity", type=float, default=None, help="Blend percent 0..100")
    sample.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

    export = sub.add_parser("export-texture", help="Write the lattice as a raw RGBA float32 buffer")
    export.add_argument("lut", help="Path to LUT file")
    export.add_argument("--out", required=True, help="Output path for the raw texture bytes")
    export.add_argument("--config", default=None, help="Optional path to YAML config")
    export.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

    apply = sub.add_parser("apply", help="Apply a LUT to a TIFF image")
    apply.add_argument("lut", help="Path to LUT file")
    apply.add_argument("input", help="Input TIFF path")
    apply.add_argument("output", help="Output TIFF path (float32)")
    apply.add_argument("--config", default=None, help="Optional path to YAML config")
    apply.add_argument("--intensity", type=float, default=None, help="Blend percent 0..100")
    apply.add_argument("--clip", action="store_true", help="Clip output to 0..1")

    return parser


def _setup(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else AppConfig()
    configure_logging(config.log_level, config.log_file)
    return config


def _resolve_intensity(args: argparse.Namespace, config: AppConfig) -> float:
    return float(args.intensity) if args.intensity is not None else float(config.engine.default_intensity)


def _describe(lattice: LatticeTable, path: Path) -> dict:
    return {
        "path": str(path),
        "title": lattice.title,
        "edge_length": lattice.edge_length,
        "samples": lattice.node_count,
        "domain_min": list(lattice.domain_min),
        "domain_max": list(lattice.domain_max),
        "fingerprint": lattice.fingerprint(),
    }


def _cmd_inspect(args: argparse.Namespace) -> int:
    _setup(args)
    path = Path(args.lut).expanduser().resolve()
    payload = _describe(load_lut(path), path)

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print(f"LUT: {payload['path']}")
    print(f"Title: {payload['title'] or '-'}")
    print(f"Edge length: {payload['edge_length']} ({payload['samples']} samples)")
    print(f"Domain: {payload['domain_min']} .. {payload['domain_max']}")
    print(f"Fingerprint: {payload['fingerprint']}")
    return 0


def _cmd_sample(args: argparse.Namespace) -> int:
    config = _setup(args)
    path = Path(args.lut).expanduser().resolve()
    application = LUTApplication(load_lut(path), intensity=_resolve_intensity(args, config))

    rgb_in = tuple(float(v) for v in args.rgb)
    rgb_out = application.apply(rgb_in)
    payload = {
        "input": list(rgb_in),
        "lut": list(sample_lattice(application.lattice, rgb_in)),
        "output": list(rgb_out),
        "intensity": application.intensity,
    }

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print(" ".join(f"{v:.6f}" for v in rgb_out))
    return 0


def _cmd_export_texture(args: argparse.Namespace) -> int:
    from lutengine.write import write_texture

    _setup(args)
    path = Path(args.lut).expanduser().resolve()
    out = Path(args.out).expanduser().resolve()
    lattice = load_lut(path)
    count = write_texture(out, lattice)

    if args.json:
        payload = {
            "lut": str(path),
            "output": str(out),
            "edge_length": lattice.edge_length,
            "values": count,
            "dtype": "float32le",
            "layout": "rgba,b-g-r",
        }
        print(json.dumps(payload, indent=2))
        return 0

    print(str(out))
    return 0


def _cmd_apply(args: argparse.Namespace) -> int:
    from lutengine.worker import FrameProcessor
    from lutengine.write import read_image, write_image

    config = _setup(args)
    application = LUTApplication(
        load_lut(Path(args.lut).expanduser().resolve()),
        intensity=_resolve_intensity(args, config),
    )
    processor = FrameProcessor.from_config(application, config.engine)
    if args.clip:
        processor.clip_output = True

    input_path = Path(args.input).expanduser().resolve()
    output_path = Path(args.output).expanduser().resolve()
    frame = read_image(input_path)
    write_image(output_path, processor.process(frame))
    logger.info("applied %s at %.1f%% to %s", args.lut, application.intensity, input_path.name)
    print(str(output_path))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "inspect":
            return _cmd_inspect(args)
        if args.command == "sample":
            return _cmd_sample(args)
        if args.command == "export-texture":
            return _cmd_export_texture(args)
        if args.command == "apply":
            return _cmd_apply(args)

        parser.error(f"unknown command: {args.command}")
        return 2
    except Exception as exc:
        logger.exception("fatal error")
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
