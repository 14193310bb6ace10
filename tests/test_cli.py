"""Tests for SumcheckConfig and the proof generation / verification scripts."""

import json

import pytest

from sumcheck_spec import gen_proof, verify_proof
from sumcheck_spec.config import SumcheckConfig
from sumcheck_spec.primitives.field import FF, FR
from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.primitives.transcript import Transcript
from sumcheck_spec.protocol.oracle import PolyOracle
from sumcheck_spec.protocol.verifier import verify


class TestSumcheckConfig:
    """Tests for the shared protocol parameters."""

    def test_defaults(self) -> None:
        config = SumcheckConfig()
        assert config.domain == b"sumcheck"
        assert config.field is FF

    def test_str_domain_is_encoded(self) -> None:
        """A str domain becomes its UTF-8 bytes."""
        assert SumcheckConfig(domain="abc").domain == b"abc"

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            SumcheckConfig(field_name="babybear")

    def test_new_transcript(self) -> None:
        """Each call returns a fresh transcript for the configured domain."""
        config = SumcheckConfig(domain=b"xyz", field_name="bn254")
        t1 = config.new_transcript()
        t1.challenge_scalar(b"r")
        t2 = config.new_transcript()
        assert t2.state_hex() == Transcript(b"xyz").state_hex()
        assert config.field is FR

    def test_gen_proof_verifies(self) -> None:
        """gen_proof() output is accepted under the same config."""
        config = SumcheckConfig(domain=b"cfg")
        poly = gen_proof.random_poly(3, config.field, seed=1)
        stmt, proof = gen_proof.gen_proof(poly, config)
        assert stmt.claim_sum == poly.sum_all()
        assert verify(stmt, proof, PolyOracle(poly), config.new_transcript()) is True


class TestScripts:
    """Round trips through the command-line entry points."""

    @pytest.mark.parametrize("field", ["goldilocks", "bn254"])
    def test_gen_then_verify(self, tmp_path, capsys, field: str) -> None:
        """A generated proof is accepted by the verifier script."""
        gen_proof.main([
            "--n-vars", "3", "--seed", "7", "--field", field,
            "--domain", "cli-test", "--output-dir", str(tmp_path),
        ])
        assert (tmp_path / "proof.json").exists()
        assert (tmp_path / "proof.bin").exists()
        assert (tmp_path / "poly.bin").exists()

        with open(tmp_path / "proof.json") as f:
            data = json.load(f)
        assert data["metadata"]["field"] == field
        assert bytes.fromhex(data["metadata"]["domain"]) == b"cli-test"

        verify_proof.main([
            "--proof", str(tmp_path / "proof.json"),
            "--poly", str(tmp_path / "poly.bin"),
        ])
        assert "Proof accepted" in capsys.readouterr().out

    def test_evals_file(self, tmp_path) -> None:
        """Evaluations can be given as a JSON list."""
        evals = tmp_path / "evals.json"
        evals.write_text(json.dumps([1, 2, 3, "4"]))
        gen_proof.main(["--evals-file", str(evals), "--output-dir", str(tmp_path)])

        with open(tmp_path / "proof.json") as f:
            data = json.load(f)
        assert data["n_vars"] == 2
        assert data["claim_sum"] == "10"
        poly = MLPoly.from_bytes((tmp_path / "poly.bin").read_bytes())
        assert poly == MLPoly.from_evals([1, 2, 3, 4])

    def test_evals_file_bad_length(self, tmp_path) -> None:
        evals = tmp_path / "evals.json"
        evals.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(SystemExit) as exc:
            gen_proof.main(["--evals-file", str(evals), "--output-dir", str(tmp_path)])
        assert exc.value.code == 1

    def test_tampered_claim_rejected(self, tmp_path, capsys) -> None:
        """Changing the claimed sum makes the verifier exit with status 1."""
        gen_proof.main(["--n-vars", "2", "--seed", "3", "--output-dir", str(tmp_path)])

        path = tmp_path / "proof.json"
        with open(path) as f:
            data = json.load(f)
        data["claim_sum"] = str((int(data["claim_sum"]) + 1) % FF.characteristic)
        with open(path, "w") as f:
            json.dump(data, f)

        with pytest.raises(SystemExit) as exc:
            verify_proof.main(["--proof", str(path), "--poly", str(tmp_path / "poly.bin")])
        assert exc.value.code == 1
        assert "InvalidProofError" in capsys.readouterr().err

    def test_wrong_poly_rejected(self, tmp_path, capsys) -> None:
        """A different polynomial with the same sum fails the oracle check."""
        gen_proof.main(["--n-vars", "2", "--seed", "3", "--output-dir", str(tmp_path)])
        poly = MLPoly.from_bytes((tmp_path / "poly.bin").read_bytes())
        other = MLPoly(2, poly.evals.copy())
        other.evals[0] += FF(1)
        other.evals[1] -= FF(1)
        (tmp_path / "other.bin").write_bytes(other.to_bytes())

        with pytest.raises(SystemExit) as exc:
            verify_proof.main([
                "--proof", str(tmp_path / "proof.json"),
                "--poly", str(tmp_path / "other.bin"),
            ])
        assert exc.value.code == 1
        assert "Proof rejected" in capsys.readouterr().out

    def test_corrupt_poly_file(self, tmp_path, capsys) -> None:
        """A truncated polynomial file is reported, not raised."""
        gen_proof.main(["--n-vars", "2", "--seed", "3", "--output-dir", str(tmp_path)])
        (tmp_path / "poly.bin").write_bytes(b"garbage")

        with pytest.raises(SystemExit) as exc:
            verify_proof.main([
                "--proof", str(tmp_path / "proof.json"),
                "--poly", str(tmp_path / "poly.bin"),
            ])
        assert exc.value.code == 1
        assert "Invalid polynomial file" in capsys.readouterr().err

    @pytest.mark.parametrize("content", ['{"n_vars": 2}', "not json", '{"n_vars": 2, "claim_sum": "x"}'])
    def test_malformed_proof_file(self, tmp_path, capsys, content: str) -> None:
        """Missing keys and unparsable JSON exit with status 1."""
        gen_proof.main(["--n-vars", "2", "--seed", "3", "--output-dir", str(tmp_path)])
        (tmp_path / "proof.json").write_text(content)

        with pytest.raises(SystemExit) as exc:
            verify_proof.main([
                "--proof", str(tmp_path / "proof.json"),
                "--poly", str(tmp_path / "poly.bin"),
            ])
        assert exc.value.code == 1
        assert "Invalid proof file" in capsys.readouterr().err

    def test_missing_files(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc:
            verify_proof.main([
                "--proof", str(tmp_path / "nope.json"),
                "--poly", str(tmp_path / "nope.bin"),
            ])
        assert exc.value.code == 1
