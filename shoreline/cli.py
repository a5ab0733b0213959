"""
Shoreline CLI - Command-line interface for the engine.

Usage:
    shoreline catalog                              Show difficulties, actions, wildcards
    shoreline simulate ACTION [ACTION ...]         Run a fixed action sequence
    shoreline play                                 Interactive game in the terminal
    shoreline serve                                Run the REST API
"""

import argparse
import logging
import random
import sys

from .catalog import DIFFICULTIES, ACTIONS, ACTION_ORDER, WILDCARDS, DEFAULT_DIFFICULTY
from .engine_core import (
    RuleSet,
    WinPolicy,
    EmissionsTiming,
    TurnController,
    EventResolver,
    current_base_rate,
)
from .engine_core.decade import pretty_money


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Shoreline - Coastal Management Simulation",
        prog="shoreline",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Catalog command
    subparsers.add_parser("catalog", help="Show difficulties, actions and wildcards")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run a fixed action sequence")
    simulate_parser.add_argument("actions", nargs="+", help="Action ids, one per decade")
    _add_game_options(simulate_parser)

    # Play command
    play_parser = subparsers.add_parser("play", help="Interactive game")
    _add_game_options(play_parser)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "catalog":
        cmd_catalog(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def _add_game_options(parser):
    parser.add_argument(
        "--difficulty", default=DEFAULT_DIFFICULTY, choices=sorted(DIFFICULTIES),
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for wildcards")
    parser.add_argument(
        "--win-policy",
        default=WinPolicy.SURVIVE.value,
        choices=[p.value for p in WinPolicy],
    )
    parser.add_argument(
        "--emissions-timing",
        default=EmissionsTiming.IMMEDIATE.value,
        choices=[t.value for t in EmissionsTiming],
    )


def _controller(args) -> TurnController:
    rules = RuleSet(
        win_policy=WinPolicy(args.win_policy),
        emissions_timing=EmissionsTiming(args.emissions_timing),
    )
    resolver = EventResolver(rng=random.Random(args.seed), rules=rules)
    return TurnController(rules=rules, event_resolver=resolver)


def _status_line(state, rules) -> str:
    return (
        f"Year {state.year} | Round {min(state.round, rules.rounds)}/{rules.rounds} | "
        f"Width {state.width} ft | Budget {pretty_money(state.budget)} | "
        f"Base rate {current_base_rate(state, rules)} ft/decade"
    )


def cmd_catalog(args):
    """Print the three catalog tables."""
    print("Difficulties:")
    for d in DIFFICULTIES.values():
        print(f"  {d.difficulty_id:<8} {d.label:<8} baseline {d.baseline_rate} ft/decade, "
              f"budget {pretty_money(d.starting_budget)}")

    print("\nActions:")
    for key in ACTION_ORDER:
        a = ACTIONS[key]
        print(f"  {a.action_id:<8} {a.title:<20} {a.cost_label:<18} {a.effect}")

    print("\nWildcards (drawn on NONE):")
    for w in WILDCARDS.values():
        print(f"  {w.event_id:<10} {w.name:<20} {w.text}")


def cmd_simulate(args):
    """Run a fixed action sequence and print the log, oldest first."""
    controller = _controller(args)
    state = controller.initial_state(args.difficulty)

    for action in args.actions:
        result = controller.advance_turn(action, state)
        if not result.success:
            print(f"Stopped: {result.error}")
            break
        state = result.new_state

    for entry in reversed(state.log):
        print(entry)
        print()
    print(_status_line(state, controller.rules))
    print(f"Result: {state.phase.value}")


def cmd_play(args):
    """Interactive game loop on stdin/stdout."""
    controller = _controller(args)
    state = controller.initial_state(args.difficulty)
    rules = controller.rules

    print(state.log[0])
    print("Actions: " + ", ".join(ACTION_ORDER) + "; also undo, reset, quit")

    while True:
        print()
        print(_status_line(state, rules))
        if state.game_over:
            print("Victory!" if state.victory else "Game over.")
            print("Type reset to play again, undo to step back, or quit.")

        try:
            choice = input("> ").strip()
        except EOFError:
            break

        command = choice.lower()
        if command in ("quit", "exit", "q"):
            break
        if command == "undo":
            if not state.can_undo:
                print("Nothing to undo.")
            state = controller.undo(state)
            continue
        if command == "reset":
            state = controller.reset(state)
            print(state.log[0])
            continue

        result = controller.advance_turn(choice, state)
        if not result.success:
            print(result.error)
            continue
        state = result.new_state
        if result.drawn_event:
            event = result.drawn_event
            print(f"Wild Card: {event.name} - {event.text}")
        print(state.log[0])


def cmd_serve(args):
    """Run the REST API with uvicorn."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install uvicorn")
        sys.exit(1)

    from .api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
