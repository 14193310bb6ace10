#!/usr/bin/env python3
"""
Verify a sumcheck proof written by gen_proof.

The field and transcript domain are read from the proof's metadata; the
polynomial file backs a PolyOracle for the final query.

Usage:
    sumcheck-verify --proof out/proof.json --poly out/poly.bin
"""

import argparse
import sys
from pathlib import Path

from sumcheck_spec.config import SumcheckConfig
from sumcheck_spec.errors import SumcheckError
from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.protocol.oracle import PolyOracle
from sumcheck_spec.protocol.proof import load_proof_from_json
from sumcheck_spec.protocol.verifier import verify


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Verify a sumcheck proof against a polynomial oracle'
    )
    parser.add_argument(
        '--proof',
        type=Path,
        required=True,
        help='Path to proof JSON file'
    )
    parser.add_argument(
        '--poly',
        type=Path,
        required=True,
        help='Path to binary polynomial file'
    )

    args = parser.parse_args(argv)

    if not args.proof.exists():
        print(f"Error: Proof file not found: {args.proof}", file=sys.stderr)
        sys.exit(1)
    if not args.poly.exists():
        print(f"Error: Polynomial file not found: {args.poly}", file=sys.stderr)
        sys.exit(1)

    try:
        stmt, proof, metadata = load_proof_from_json(str(args.proof))
        config = SumcheckConfig(
            domain=bytes.fromhex(metadata.get("domain", b"sumcheck".hex())),
            field_name=metadata.get("field", "goldilocks"),
        )
    except (ValueError, KeyError, TypeError) as e:
        print(f"Error: Invalid proof file {args.proof}: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        poly = MLPoly.from_bytes(args.poly.read_bytes(), config.field)
    except ValueError as e:
        print(f"Error: Invalid polynomial file {args.poly}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Verifying {proof.num_rounds()}-round proof over {config.field_name}...")
    try:
        ok = verify(stmt, proof, PolyOracle(poly), config.new_transcript())
    except SumcheckError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    if not ok:
        print("Proof rejected")
        sys.exit(1)
    print("Proof accepted")


if __name__ == '__main__':
    main()
