"""
Command-line interface for lanecurve.

Provides commands for spawning lanes, sampling them and writing a default
configuration file.
"""

import argparse
import sys

from lanecurve.config import load_config, save_default_config
from lanecurve.models import SamplingMode
from lanecurve.tracer import configure_tracer, get_tracer


def _add_trace_arguments(parser):
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default=None,
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level (implies --trace)",
    )
    parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs (implies --trace)",
    )
    parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output (implies --trace)",
    )


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lanecurve",
        description="lanecurve: place and sample paired cubic curves for lanes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Spawn command
    spawn_parser = subparsers.add_parser("spawn", help="Spawn a straight lane and save it")
    spawn_parser.add_argument(
        "--origin",
        nargs=3,
        type=float,
        default=[0.0, 0.0, 0.0],
        metavar=("X", "Y", "Z"),
        help="World-space start centre of the lane",
    )
    spawn_parser.add_argument(
        "--rotation",
        nargs=3,
        type=float,
        default=None,
        metavar=("RX", "RY", "RZ"),
        help="Lane rotation as Euler angles in degrees",
    )
    spawn_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    spawn_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    _add_trace_arguments(spawn_parser)

    # Sample command
    sample_parser = subparsers.add_parser("sample", help="Sample a saved lane")
    sample_parser.add_argument(
        "--lane",
        required=True,
        help="Path to lane.json from a previous spawn",
    )
    sample_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    sample_parser.add_argument(
        "--mode",
        default=None,
        choices=[m.value for m in SamplingMode],
        help="Sampling mode (defaults to the configured mode)",
    )
    sample_parser.add_argument(
        "--value",
        type=float,
        default=None,
        help="Step, spacing or count for the sampling mode",
    )
    sample_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    _add_trace_arguments(sample_parser)

    # Init config command
    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="lanecurve_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "spawn":
        return handle_spawn(args)
    elif args.command == "sample":
        return handle_sample(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def _configure_tracing(args, config):
    """Configure the tracer from --trace flags, or from the config file when no flag is given."""
    if args.trace or args.trace_level or args.trace_file or args.trace_json:
        configure_tracer(
            enabled=True,
            level=args.trace_level or config.tracing.level,
            file_path=args.trace_file or config.tracing.file_path,
            json_output=args.trace_json or config.tracing.json_output,
        )
        return

    configure_tracer(
        enabled=config.tracing.enabled,
        level=config.tracing.level,
        file_path=config.tracing.file_path,
        json_output=config.tracing.json_output,
    )


def handle_spawn(args):
    """Handle the spawn command."""
    tracer = get_tracer()

    try:
        from lanecurve.pipeline import run_spawn

        config = load_config(args.config)
        _configure_tracing(args, config)

        with tracer.span("cli_spawn", module="cli"):
            lane = run_spawn(
                origin=args.origin,
                out_dir=args.out,
                config=config,
                rotation=args.rotation,
            )

        print(f"\nLane spawned: {lane.lane_id}")
        print(f"  Right rail length: {lane.right.estimate_length():.3f}")
        print(f"  Left rail length: {lane.left.estimate_length():.3f}")
        print(f"\nSaved to: {args.out}/lane.json")
        return 0

    except Exception as e:
        tracer.event(f"Spawn failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1
    finally:
        tracer.config.close()


def handle_sample(args):
    """Handle the sample command."""
    tracer = get_tracer()

    try:
        from lanecurve.pipeline import run_sampling

        config = load_config(args.config)
        _configure_tracing(args, config)

        with tracer.span("cli_sample", module="cli"):
            lane, record, report = run_sampling(
                lane_path=args.lane,
                out_dir=args.out,
                config=config,
                mode=args.mode,
                value=args.value,
            )

        print(f"\nLane sampled: {lane.lane_id}")
        print(f"  Mode: {record.request.mode.value} ({record.request.value:g})")
        print(f"  Right samples: {len(record.right)}")
        print(f"  Left samples: {len(record.left)}")
        print(f"  Validation errors: {report.error_count}")
        print(f"  Validation warnings: {report.warning_count}")
        print(f"\nOutputs saved to: {args.out}/")
        print(f"  - samples.json")
        print(f"  - validation_report.json")
        print(f"  - validation_summary.txt")

        if report.has_errors:
            print(f"\n[!] Validation errors detected. Review validation_report.json")
            return 1

        return 0

    except Exception as e:
        tracer.event(f"Sampling failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1
    finally:
        tracer.config.close()


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
