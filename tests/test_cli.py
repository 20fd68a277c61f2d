"""Tests for cli.py: argument handling and subcommand output."""

import pysam
import pytest

from samregion import __version__
from samregion.cli import main


def run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


@pytest.fixture
def bam_path(tmp_path):
    path = tmp_path / "empty.bam"
    header = {"HD": {"VN": "1.6"}, "SQ": [{"SN": "chr1", "LN": 1000}, {"SN": "chr2", "LN": 500}]}
    with pysam.AlignmentFile(str(path), "wb", header=header):
        pass
    return str(path)


class TestMain:
    def test_no_command(self, capsys):
        assert run([]) == 1

    def test_version(self, capsys):
        assert run(["--version"]) == 0
        assert __version__ in capsys.readouterr().out


# ── parse ────────────────────────────────────────────────────────────────────


class TestParseCommand:
    def test_forward(self, capsys):
        assert run(["parse", "chr1:100-200"]) == 0
        assert capsys.readouterr().out == "chr1:100-200\tchr1\t100\t200\t100\tFalse\n"

    def test_inverted(self, capsys):
        assert run(["parse", "chr1:200-100"]) == 0
        assert capsys.readouterr().out == "chr1:200-100\tchr1\t100\t200\t100\tTrue\n"

    def test_prefix(self, capsys):
        assert run(["parse", "--prefix", "chr", "chrUn_1:1-2"]) == 0
        assert capsys.readouterr().out.split("\t")[1] == "Un_1"

    def test_optional(self, capsys):
        assert run(["parse", "--optional", "chr1", "chr1:5"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["chr1\tchr1\t.\t.\t.\t.", "chr1:5\tchr1\t5\t.\t.\t."]

    def test_invalid(self, capsys):
        assert run(["parse", "chr1"]) == 1
        assert "Error:" in capsys.readouterr().err


# ── bed ──────────────────────────────────────────────────────────────────────


class TestBedCommand:
    def test_stdout(self, capsys):
        assert run(["bed", "chr1:1000-2000"]) == 0
        assert capsys.readouterr().out == "chr1\t999\t2000\tchr1:1000-2000\n"

    def test_pad_and_file(self, tmp_path):
        out = tmp_path / "out.bed"
        regions = tmp_path / "regions.txt"
        regions.write_text("# wanted\nchr2 10 20\n\n")
        assert run(["bed", "--pad", "5", "--regions-file", str(regions), "--out-bed", str(out)]) == 0
        assert out.read_text() == "chr2\t4\t25\tchr2:10-20\n"

    def test_zero_start(self, capsys):
        assert run(["bed", "chr1:0-10"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_regions(self):
        assert run(["bed"]) == 1

    def test_negative_pad(self):
        assert run(["bed", "--pad", "-1", "chr1:1-2"]) == 1


# ── resolve ──────────────────────────────────────────────────────────────────


class TestResolveCommand:
    def test_resolve(self, bam_path, capsys):
        assert run(["resolve", "--bam", bam_path, "chr2:10-20", "1:5-1"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "chr2:10-20\t1\t10\t20\t10",
            "1:5-1\t0\t1\t5\t4",
        ]

    def test_unknown_contig(self, bam_path, capsys):
        assert run(["resolve", "--bam", bam_path, "chr9:1-2"]) == 1
        assert "not recognized" in capsys.readouterr().err


class TestBedCommandInBed:
    def test_bed_input_unshifted(self, tmp_path):
        src = tmp_path / "in.bed"
        src.write_text("track name=x\nchr1\t0\t100\nchr2\t10\t20\tgeneA\n")
        out = tmp_path / "out.bed"
        assert run(["bed", "--in-bed", str(src), "--out-bed", str(out)]) == 0
        rows = [line.split("\t")[:3] for line in out.read_text().splitlines()]
        assert rows == [["chr1", "0", "100"], ["chr2", "10", "20"]]

    def test_mixed_with_text_regions(self, tmp_path, capsys):
        src = tmp_path / "in.bed"
        src.write_text("chr3\t5\t9\n")
        assert run(["bed", "chr1:1-10", "--in-bed", str(src)]) == 0
        rows = [line.split("\t")[:3] for line in capsys.readouterr().out.splitlines()]
        assert rows == [["chr1", "0", "10"], ["chr3", "5", "9"]]

    def test_bad_bed_line(self, tmp_path, capsys):
        src = tmp_path / "in.bed"
        src.write_text("chr1\tx\t9\n")
        assert run(["bed", "--in-bed", str(src)]) == 1
        assert "line 1" in capsys.readouterr().err
