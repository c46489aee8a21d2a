#!/usr/bin/env python3

import argparse
import json
import os
import sys

from config import Config
from drillpress.program_assembler import DrillProgramGenerator, NoHolesError
from drillpress.utils.validators import (
    get_config_warnings,
    validate_config,
    validate_holes_in_envelope
)
from web.services.settings_service import build_machine_envelope, build_settings
from web.services.toolpath_service import ToolpathService, PayloadError


def config_mapping(config_class=Config):
    """Upper-case settings of a config class, as Flask's from_object reads them."""
    return {key: getattr(config_class, key) for key in dir(config_class) if key.isupper()}


def load_job(path):
    """Read a JSON job file and parse it into (holes, config)."""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise PayloadError(f"Job file not found: {path}")
    except json.JSONDecodeError as e:
        raise PayloadError(f"Job file is not valid JSON: {e}")
    return ToolpathService.parse_job(data)


def main(argv=None):
    """Command line entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Generate an OpenSBP drilling program from a JSON job file")
    parser.add_argument('job', help="JSON file with 'config' and 'holes' and/or 'operations'")
    parser.add_argument('-o', '--output-dir', default='output', help="Directory for the .sbp file")
    parser.add_argument('--preview', type=int, default=10, help="Number of program lines to print")
    args = parser.parse_args(argv)

    print("=== Drill Press Toolpath Generator ===")
    app_config = config_mapping()
    envelope = build_machine_envelope(app_config)

    try:
        holes, config = load_job(args.job)
    except PayloadError as e:
        print("\n❌ ERROR: Problem with job file:")
        print(str(e))
        return 1

    errors = validate_config(config)
    errors.extend(validate_holes_in_envelope(holes, envelope))
    if errors:
        print("\n❌ Configuration errors:")
        for error in errors:
            print(f"- {error}")
        return 1

    for warning in get_config_warnings(config, envelope):
        print(f"⚠️  {warning}")

    try:
        program = DrillProgramGenerator(build_settings(app_config)).generate(holes, config)
    except NoHolesError as e:
        print(f"\n❌ {e}")
        return 1

    os.makedirs(args.output_dir, exist_ok=True)
    base_name = os.path.splitext(os.path.basename(args.job))[0]
    output_file = os.path.join(args.output_dir, f"{base_name}.sbp")
    with open(output_file, 'w') as f:
        f.write(program)

    print(f"✅ {len(holes)} {config.type} hole(s) written to {output_file}")

    lines = program.split('\n')
    if args.preview > 0:
        print(f"\n--- Program preview (first {args.preview} lines) ---")
        for i, line in enumerate(lines[:args.preview]):
            print(f"{i+1:2d}: {line}")
        if len(lines) > args.preview:
            print(f"... ({len(lines) - args.preview} more lines)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
