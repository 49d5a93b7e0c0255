import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from .counter import aggregate_frequencies
from .encoder import HuffmanTree, build_code_table, sorted_codes, weighted_length
from .utils import HuffcodeError, setup_logger

console = Console()
install(show_locals=True)

app = typer.Typer()


def display_character(character: str) -> str:
    # e.g. "\n" -> "\\n"
    if character.isprintable():
        return character
    return repr(character)[1:-1]


@app.command()
def run(
    file: Path = typer.Argument(
        ...,
        help="Text file to analyze",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    encoding: str = typer.Option("utf-8", "-e", "--encoding", help="Text encoding of the file"),
    codes: bool = typer.Option(False, "-c", "--codes", help="Also print the Huffman code table"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    setup_logger(logging)
    try:
        st = time.perf_counter()
        with open(file, "r", encoding=encoding, newline="") as f:
            frequencies = aggregate_frequencies(f)

        for character, count in frequencies.items():
            console.print(f"{display_character(character)} {count}", markup=False, highlight=False)

        if codes and frequencies:
            code_table = build_code_table(HuffmanTree.build(frequencies))
            table = Table("Character", "Count", "Code")
            for character, code in sorted_codes(code_table):
                table.add_row(escape(display_character(character)), str(frequencies[character]), code)
            console.print(table)
            console.print(f"Encoded size: {weighted_length(code_table, frequencies)} bits")

        if logging:
            dt = time.perf_counter() - st
            console.print(f"Elapsed time: {dt:.3f} sec")
    # LookupError: unknown encoding name
    except (HuffcodeError, LookupError) as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(run)
