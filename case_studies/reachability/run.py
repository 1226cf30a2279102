"""Reachability — end-to-end finrel demonstration.

Builds the step relation over states 1..5, takes its Kleene closure, sorts
it and prints the tuples. The classification reports and the SHACL check of
the successor bijection follow; the SHACL part needs the `rdf` extra.

Run with:  python -m case_studies.reachability.run [--shacl] [-v]
"""

import logging
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from .domain import build_reachability, build_steps, build_successor


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def run_closure_demo():
    print_header("Step relation")
    steps = build_steps()
    print(f"\n  {steps}")
    print()
    print(steps.classify().summary())

    print_header("Reachability (Kleene closure)")
    reach = build_reachability()
    print(f"\n  {reach}")
    print()
    print(reach.classify().summary())


def run_shacl_demo():
    from finrel.rdf_bridge import shacl_validate

    print_header("SHACL: successor is a bijection")
    successor = build_successor()
    result = shacl_validate(
        successor, total=True, univalent=True, surjective=True, injective=True,
    )
    print()
    print(result.summary())

    print_header("SHACL: step relation is not a function")
    result = shacl_validate(build_steps(), total=True, univalent=True)
    print()
    print(result.summary())


def run_kleene():
    """Close the step relation, sort it and print the tuples."""
    print(build_reachability())


def main(shacl: bool = False):
    run_kleene()
    run_closure_demo()
    if shacl:
        run_shacl_demo()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    main(shacl="--shacl" in sys.argv)
