import re, subprocess, sys

def test_bench_subcommand_smoke():
    proc = subprocess.run([sys.executable, '-m', 'quantseq.cli', 'bench', '--size', '2000', '--repeat', '1'], capture_output=True, text=True, timeout=60)
    assert proc.returncode == 0, proc.stderr
    out = proc.stdout + proc.stderr
    # Look for the three timing lines
    for label in ("selection", "full sort", "numpy"):
        assert re.search(rf'{label}\s+\d+\.\d+ ms', out), f"Missing {label} timing. Got: {out}"
