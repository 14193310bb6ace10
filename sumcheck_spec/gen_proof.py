#!/usr/bin/env python3
"""
Generate a sumcheck proof for a multilinear polynomial.

The polynomial is either read from a JSON list of evaluations or drawn at
random from a seed. The honest sum is claimed, the proof is written as JSON
(statement + round polynomials) and binary, and the polynomial itself is
written in binary so that verify_proof can use it as the oracle.

Usage:
    sumcheck-gen-proof --n-vars 4 --seed 1 --output-dir out/
    sumcheck-gen-proof --evals-file evals.json --field bn254 --output-dir out/
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Type

import galois

from sumcheck_spec.config import SumcheckConfig
from sumcheck_spec.primitives.field import FIELDS
from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.protocol.proof import Statement, SumcheckProof, proof_to_json
from sumcheck_spec.protocol.prover import prove


def random_poly(n_vars: int, field: Type[galois.FieldArray], seed: Optional[int] = None) -> MLPoly:
    """Multilinear polynomial with uniformly random evaluations."""
    return MLPoly(n_vars, field.Random(1 << n_vars, seed=seed))


def load_evals(path: Path, field: Type[galois.FieldArray]) -> MLPoly:
    """Read a JSON list of integer (or decimal string) evaluations."""
    with open(path) as f:
        data = json.load(f)
    return MLPoly.from_evals([int(v) for v in data], field=field)


def gen_proof(poly: MLPoly, config: SumcheckConfig) -> tuple[Statement, SumcheckProof]:
    """Claim the honest sum of poly and prove it."""
    stmt = Statement(poly.n_vars, poly.sum_all())
    proof = prove(stmt, poly, config.new_transcript())
    return stmt, proof


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate a sumcheck proof for a multilinear polynomial'
    )
    parser.add_argument(
        '--n-vars',
        type=int,
        default=4,
        help='Number of variables of the random polynomial'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random polynomial'
    )
    parser.add_argument(
        '--evals-file',
        type=Path,
        default=None,
        help='JSON list of 2^n evaluations (overrides --n-vars/--seed)'
    )
    parser.add_argument(
        '--field',
        choices=sorted(FIELDS),
        default='goldilocks',
        help='Prime field'
    )
    parser.add_argument(
        '--domain',
        type=str,
        default='sumcheck',
        help='Transcript domain label'
    )
    parser.add_argument(
        '--output-dir',
        type=Path,
        required=True,
        help='Directory for proof.json, proof.bin and poly.bin'
    )

    args = parser.parse_args(argv)
    config = SumcheckConfig(domain=args.domain, field_name=args.field)

    if args.evals_file is not None:
        if not args.evals_file.exists():
            print(f"Error: Evaluations file not found: {args.evals_file}", file=sys.stderr)
            sys.exit(1)
        try:
            poly = load_evals(args.evals_file, config.field)
        except ValueError as e:
            print(f"Error: Invalid evaluations in {args.evals_file}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        if args.n_vars < 0:
            print(f"Error: --n-vars must be non-negative, got {args.n_vars}", file=sys.stderr)
            sys.exit(1)
        poly = random_poly(args.n_vars, config.field, args.seed)

    print(f"Proving sum of {poly.n_vars}-variable polynomial over {args.field}...")
    stmt, proof = gen_proof(poly, config)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    with open(args.output_dir / 'proof.json', 'w') as f:
        json.dump(proof_to_json(proof, stmt, config.domain), f, indent=2)
    (args.output_dir / 'proof.bin').write_bytes(proof.to_bytes())
    (args.output_dir / 'poly.bin').write_bytes(poly.to_bytes())

    print(f"Written proof to {args.output_dir}")

    # Summary
    print(f"\nSummary:")
    print(f"  Field: {args.field}")
    print(f"  Variables: {stmt.n_vars}")
    print(f"  Claimed sum: {int(stmt.claim_sum)}")
    print(f"  Proof size: {len(proof.to_bytes())} bytes")


if __name__ == '__main__':
    main()
