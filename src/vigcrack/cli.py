from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from vigcrack.classical import register_all
from vigcrack.classical.common import parse_shift, require_alpha_key
from vigcrack.classical.monoalphabetic.caesar import caesar_shift, rank_shifts
from vigcrack.core.attack import SAMPLE_CIPHERTEXT, run_attack
from vigcrack.core.config import AttackConfig
from vigcrack.core.errors import FileAccessError, InvalidArgumentError
from vigcrack.core.features import (
    ENGLISH_IOC,
    MAX_KEY_LENGTH,
    RANDOM_IOC,
    check_threshold,
    ioc_scan,
    letter_frequencies,
)
from vigcrack.core.registry import decrypt_known, encrypt_known, list_plugins
from vigcrack.core.results import LIKELY_THRESHOLD, AttackReport, FrequencyReport, IocScan, RecoveredKey
from vigcrack.core.utils import normalize_az
from vigcrack.core.textio import (
    DECRYPTED_PREFIX,
    ENCRYPTED_PREFIX,
    SHIFTED_PREFIX,
    read_text_file,
    write_prefixed_output,
)

app = typer.Typer(help="vigcrack: break Vigenère ciphers with Kasiski, IoC and chi-squared analysis.")

RULE = "=" * 40


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis steps to stderr."),
):
    # Register plugins exactly once per CLI run
    register_all()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _read(path: Path) -> str:
    try:
        return read_text_file(path)
    except FileAccessError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _write(path: Path, prefix: str, content: str) -> Path:
    try:
        return write_prefixed_output(path, prefix, content)
    except FileAccessError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _heading(title: str) -> None:
    typer.echo(f"\n{RULE}\n{title}\n{RULE}\n")


# ----------------------------
# Report printing
# ----------------------------


def _echo_kasiski(report: AttackReport, cfg: AttackConfig) -> None:
    _heading("KASISKI METHOD - Repeated Sequences")

    names = {3: "TRIGRAMS", 4: "TETRAGRAMS"}
    for r in report.kasiski.reports:
        title = f"Looking for repeated {names.get(r.n, f'{r.n}-GRAMS')} ({r.n} letters):"
        typer.echo(title)
        typer.echo("-" * len(title))
        if not r.occurrences:
            typer.echo("  (none)")
        # tetragrams are rare enough to list in full
        limit = len(r.occurrences) if r.n >= 4 else cfg.max_listed_ngrams
        for occ in r.occurrences[:limit]:
            positions = " ".join(str(p) for p in occ.positions)
            distances = " ".join(str(d) for d in occ.distances)
            typer.echo(f'"{occ.sequence}" at positions: {positions}  -> distances: {distances}')
        if len(r.occurrences) > limit:
            typer.echo(f"... (showing first {limit} of {len(r.occurrences)})")
        typer.echo("")

    typer.echo("Analyzing distances:")
    typer.echo("--------------------")
    for r in report.kasiski.reports:
        if r.has_evidence:
            typer.echo(f"GCD of {r.n}-gram distances: {r.gcd}")
        else:
            typer.echo(f"GCD of {r.n}-gram distances: no repeats")

    top = report.kasiski.top(cfg.top_distances)
    if top:
        typer.echo("\nMost common distances:")
        for dist, count in top:
            typer.echo(f"  Distance {dist} appears {count} times")


def _echo_ioc(scan: IocScan, threshold: float) -> None:
    _heading("INDEX OF COINCIDENCE - Key Length Test")
    if not scan.has_letters:
        typer.echo("No letters found in input.")
        return

    typer.echo(f"Testing key lengths 1-{len(scan.hypotheses)}:")
    typer.echo(f"(English text IC ~ {ENGLISH_IOC:.3f}, random text IC ~ {RANDOM_IOC:.3f})\n")
    for h in scan.hypotheses:
        marker = " *** LIKELY ***" if h.avg_ic > threshold else ""
        typer.echo(f"Key length {h.length:2d}: IC = {h.avg_ic:.4f}{marker}")

    if scan.best is not None:
        typer.echo(f"\nBest candidate: key length {scan.best.length} with IC = {scan.best.avg_ic:.4f}")


def _echo_recovery(ciphertext: str, recovered: RecoveredKey, plaintext: str) -> None:
    klen = recovered.length
    _heading("KEY RECOVERY - Frequency Analysis")
    typer.echo(f"Attempting to recover key of length {klen}...\n")
    for i, r in enumerate(recovered.shifts):
        n_letters = len(ciphertext[i::klen])
        typer.echo(f"Column {i} (positions {i}, {i + klen}, {i + 2 * klen}, ...) has {n_letters} letters")
        typer.echo(f"  -> Key letter {i} is: {r.letter}  (chi2={r.chi_squared:.2f})\n")
    typer.echo(f"Recovered key: {recovered.key}")

    _heading("DECRYPTION")
    typer.echo("Decrypted text:")
    typer.echo(plaintext)


CHART_WIDTH = 50
PREVIEW_WIDTH = 50


def _echo_chart(report: FrequencyReport) -> None:
    typer.echo(f"Letter Frequencies (Total: {report.total} letters)\n")
    peak = max(report.counts)
    for f in report.frequencies:
        bar = "█" * round(f.count * CHART_WIDTH / peak)
        typer.echo(f"{f.letter}: {bar} {f.count} ({f.percentage:.2f}%)")


# ----------------------------
# Commands
# ----------------------------


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def attack(
    path: Optional[Path] = typer.Argument(None, help="Ciphertext file. Uses a built-in sample if omitted."),
    key_length: Optional[int] = typer.Option(
        None, "--key-length", "-k", help="Key length to recover. Prompts if omitted; 0 exits."
    ),
    manual_key: Optional[str] = typer.Option(
        None, "--manual-key", "-m", help="Also decrypt with this key. Prompts if omitted."
    ),
    max_length: int = typer.Option(15, "--max-length", help=f"Largest key length to score (<= {MAX_KEY_LENGTH})."),
    top: int = typer.Option(10, "--top", "-t", help="How many common distances to show."),
):
    """Kasiski + IoC analysis, then key recovery for a chosen key length."""
    if path is not None:
        text = _read(path)
        typer.echo(f"Loaded ciphertext from: {path}")
    else:
        text = SAMPLE_CIPHERTEXT
        typer.echo("Using example ciphertext.")

    try:
        cfg = AttackConfig(max_key_length=max_length, top_distances=top)
        report = run_attack(text, cfg)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))

    typer.echo(f"Ciphertext length: {len(report.ciphertext)} letters")
    typer.echo(f"Ciphertext: {report.ciphertext}")

    _echo_kasiski(report, cfg)
    _echo_ioc(report.ioc, cfg.likely_threshold)

    if key_length is None:
        typer.echo(f"\n{RULE}")
        typer.echo("Based on the analysis above, what key length do you want to try?")
        key_length = typer.prompt("Enter key length (or 0 to exit)", type=int, default=0, show_default=False)

    if key_length <= 0 or key_length > MAX_KEY_LENGTH:
        typer.echo("Exiting.")
        raise typer.Exit(code=0)

    report = run_attack(text, cfg, key_length=key_length)
    _echo_recovery(report.ciphertext, report.recovered, report.plaintext)

    if manual_key is None:
        typer.echo("\nIf the above doesn't look right, you can try a different key.")
        manual_key = typer.prompt("Enter key manually (or press Enter to finish)", default="", show_default=False)

    try:
        report = run_attack(text, cfg, key_length=key_length, manual_key=manual_key)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))
    if report.manual_key:
        typer.echo(f'\nDecrypted with key "{report.manual_key}":')
        typer.echo(report.manual_plaintext)


def _run_tool(path: Path, cipher: str, key: str, *, encrypt: bool) -> None:
    try:
        key = require_alpha_key(key)
        content = _read(path)
        if encrypt:
            processed = encrypt_known(cipher, content, key)
        else:
            processed = decrypt_known(cipher, content, key)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))

    mode = "encrypt" if encrypt else "decrypt"
    out = _write(path, ENCRYPTED_PREFIX if encrypt else DECRYPTED_PREFIX, processed)
    typer.echo(f"Processed {path} in {mode} mode with key '{key}'")
    typer.echo(f"Output written to {out}")


@app.command()
def encrypt(
    path: Path = typer.Argument(..., help="Plaintext file."),
    key: str = typer.Option(..., "--key", "-k", help="Letters-only key."),
    cipher: str = typer.Option("vigenere", "--cipher", "-c", help="Cipher plugin name."),
):
    """Encrypt a file, writing encrypted_<name> next to it."""
    _run_tool(path, cipher, key, encrypt=True)


@app.command()
def decrypt(
    path: Path = typer.Argument(..., help="Ciphertext file."),
    key: str = typer.Option(..., "--key", "-k", help="Letters-only key."),
    cipher: str = typer.Option("vigenere", "--cipher", "-c", help="Cipher plugin name."),
):
    """Decrypt a file with a known key, writing decrypted_<name> next to it."""
    _run_tool(path, cipher, key, encrypt=False)


@app.command()
def shift(
    path: Path = typer.Argument(..., help="Input file."),
    amount: str = typer.Argument(..., help="Shift between -25 and 25."),
):
    """Caesar-shift a file, writing shifted_<name> next to it."""
    try:
        n = parse_shift(amount)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))

    content = _read(path)
    out = _write(path, SHIFTED_PREFIX, encrypt_known("caesar", content, str(n)))
    typer.echo(f"Processed {path} with shift {n}")
    typer.echo(f"Output written to {out}")


@app.command()
def freq(
    path: Optional[Path] = typer.Argument(None, help="Input file. Reads stdin if omitted."),
    chart: bool = typer.Option(False, "--chart", help="Draw an ASCII bar chart instead of a table."),
):
    """Letter frequency report."""
    text = _read(path) if path is not None else typer.get_text_stream("stdin").read()
    report = letter_frequencies(text)
    if not report.has_letters:
        typer.echo("No letters found in input.")
        return

    if chart:
        _echo_chart(report)
        return

    typer.echo(f"Letter frequencies (total letters: {report.total}):\n")
    for f in report.frequencies:
        typer.echo(f"{f.letter}: {f.percentage:6.2f}% ({f.count})")


@app.command()
def ioc(
    text: str = typer.Argument(...),
    max_length: int = typer.Option(15, "--max-length", help=f"Largest key length to score (<= {MAX_KEY_LENGTH})."),
    threshold: float = typer.Option(LIKELY_THRESHOLD, "--threshold", help="Mark lengths scoring above this (0..1)."),
):
    """Index-of-coincidence table for key lengths 1..max-length."""
    try:
        check_threshold(threshold)
        scan = ioc_scan(text, max_length=max_length)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e))
    _echo_ioc(scan, threshold)


@app.command("crack-caesar")
def crack_caesar(
    text: str = typer.Argument(..., help="Caesar-shifted text."),
    top: int = typer.Option(3, "--top", "-t", min=1, max=26, help="How many candidate shifts to show."),
):
    """Try all 26 shifts and list the best by chi-squared against English."""
    az = normalize_az(text)
    if not az:
        typer.echo("No letters found in input.")
        return

    typer.echo(f"Top {top} most likely decryptions:\n")
    for rank, r in enumerate(rank_shifts(az)[:top], start=1):
        preview = caesar_shift(text, -r.shift)
        if len(preview) > PREVIEW_WIDTH:
            preview = preview[:PREVIEW_WIDTH] + "..."
        typer.echo(f"{rank}. Shift {r.shift} (Key: {r.letter})")
        typer.echo(f"   Chi-squared: {r.chi_squared:.2f}")
        typer.echo(f"   Text: {preview}\n")


def main():
    app()


if __name__ == "__main__":
    main()
