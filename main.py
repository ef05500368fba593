"""Entry point for update-rules: decide how strongly to prompt for an update."""

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    from update_rules.domain.rules import PRESETS
    from update_rules.version import __version__

    parser = argparse.ArgumentParser(
        prog="update-rules",
        description="Compare an installed and an available version and print the alert severity.",
    )
    parser.add_argument("installed", help="installed version, e.g. 1.5.0")
    parser.add_argument("available", help="published version, e.g. 2.6.0")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="use a static preset")
    parser.add_argument("--frequency", choices=["immediately", "daily", "weekly"])
    parser.add_argument("--voluntary", type=int, help="minor releases behind before offering the update")
    parser.add_argument("--involuntary", type=int, help="minor releases behind before forcing the update")
    parser.add_argument(
        "--major-involuntary",
        type=int,
        help="minor version of the next major line after which the update is forced",
    )
    parser.add_argument("--config", help="path to a JSON policy file")
    parser.add_argument("--app-name", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _settings(args: argparse.Namespace) -> dict:
    from update_rules.adapters.config.json_config_adapter import JsonConfigAdapter

    cfg = JsonConfigAdapter(path=args.config).load()
    if args.preset:
        cfg.update({"mode": "preset", "preset": args.preset})

    overrides = {
        "frequency": args.frequency,
        "voluntary_gap": args.voluntary,
        "involuntary_gap": args.involuntary,
        "major_involuntary_gap": args.major_involuntary,
    }
    given = {key: value for key, value in overrides.items() if value is not None}
    if given:
        cfg["mode"] = "conditional"
        cfg.update(given)
    return cfg


THRESHOLD_FLAGS = {
    "frequency": "--frequency",
    "voluntary": "--voluntary",
    "involuntary": "--involuntary",
    "major_involuntary": "--major-involuntary",
}


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    mixed = [flag for dest, flag in THRESHOLD_FLAGS.items() if getattr(args, dest) is not None]
    if args.preset and mixed:
        parser.error(f"--preset cannot be combined with {', '.join(mixed)}")

    from update_rules.config import DEFAULT_APP_NAME, policy_from_config
    from update_rules.adapters.version_source.static_version_source import StaticVersionSource
    from update_rules.domain.errors import UpdateRulesError
    from update_rules.domain.rules import RuleEngine
    from update_rules.logging_setup import configure_logging
    from update_rules.usecases.check_update import CheckUpdateUseCase

    configure_logging(args.verbose)

    try:
        engine = RuleEngine(policy_from_config(_settings(args)))
        use_case = CheckUpdateUseCase(
            StaticVersionSource(args.available),
            engine,
            args.installed,
            app_name=args.app_name or DEFAULT_APP_NAME,
        )
    except (UpdateRulesError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    prompt = use_case.execute()

    decision = engine.decision
    if prompt is None:
        print(f"severity: none (frequency: {decision.frequency.name.lower()})")
        return 0

    print(f"severity: {decision.severity.value} (frequency: {decision.frequency.name.lower()})")
    if prompt.alert:
        print(prompt.alert.title)
        print(prompt.alert.message)
        print("buttons: " + ", ".join(prompt.alert.buttons))
    return 0


if __name__ == "__main__":
    sys.exit(main())
