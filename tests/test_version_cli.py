import subprocess, sys, re


def test_cli_version_matches_package():
    # Run the CLI with --version
    proc = subprocess.run([sys.executable, '-m', 'quantseq.cli', '--version'], capture_output=True, text=True)
    assert proc.returncode == 0
    out = (proc.stdout + proc.stderr).strip()
    # Expect something like: quantseq X.Y.Z
    m = re.match(r'quantseq\s+(\d+\.\d+\.\d+)', out)
    assert m, f'Unexpected version output: {out}'
    reported = m.group(1)
    # Import package version
    import quantseq
    assert reported == quantseq.__version__, f"CLI version {reported} != package {quantseq.__version__}"


def test_version_subcommand():
    proc = subprocess.run([sys.executable, '-m', 'quantseq.cli', 'version'], capture_output=True, text=True)
    assert proc.returncode == 0
    assert proc.stdout.startswith('quantseq ')
