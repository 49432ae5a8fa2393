"""Small file utilities run in child processes: copy, grep, ls and a pipe."""

from __future__ import annotations

import argparse
import multiprocessing
import os
import shutil
import sys
from pathlib import Path
from typing import Iterator, Sequence

PathLike = "str | os.PathLike[str]"


def copy_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> Path:
    """Copy the contents of ``source`` into ``destination`` and return its path."""
    with open(source, "rb") as src, open(destination, "wb") as dest:
        shutil.copyfileobj(src, dest)
    return Path(destination)


def grep_lines(path: str | os.PathLike[str], word: str) -> list[str]:
    """Return the lines of the file that contain ``word`` anywhere."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\r\n") for line in handle if word in line]


def count_word(path: str | os.PathLike[str], word: str) -> int:
    """Count whitespace-separated words in the file that equal ``word``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return sum(token == word for line in handle for token in line.split())


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return the sorted names in a directory, leaving out hidden ones."""
    return sorted(name for name in os.listdir(path) if not name.startswith("."))


def _uppercase_child(from_parent, to_parent) -> None:
    message = from_parent.recv()
    from_parent.close()
    to_parent.send(message.upper())
    to_parent.close()


def uppercase_via_child(message: str) -> str:
    """Send ``message`` to a child process over a pipe and get it back upper-cased."""
    child_in, parent_out = multiprocessing.Pipe(duplex=False)
    parent_in, child_out = multiprocessing.Pipe(duplex=False)
    child = multiprocessing.Process(target=_uppercase_child, args=(child_in, child_out))
    child.start()
    child_in.close()
    child_out.close()
    try:
        parent_out.send(message)
        parent_out.close()
        try:
            return parent_in.recv()
        except EOFError:
            raise RuntimeError("child process ended without replying") from None
    finally:
        parent_in.close()
        child.join()


def _copy_child(source: str, destination: str) -> None:
    print(f"Executing copy process with arguments: {source}, {destination}", flush=True)
    try:
        copy_file(source, destination)
    except OSError as exc:
        print(f"Failed to copy: {exc}", file=sys.stderr, flush=True)
        sys.exit(1)


def _grep_child(path: str, word: str) -> None:
    print(f"Executing grep process with arguments: {path}, {word}", flush=True)
    try:
        for _ in grep_lines(path, word):
            print("found", flush=True)
    except OSError as exc:
        print(f"Failed to grep: {exc}", file=sys.stderr, flush=True)
        sys.exit(1)


def run_copy_and_grep(
    copy_source: str, copy_destination: str, grep_path: str, grep_word: str
) -> tuple[int, int]:
    """Run a copy and a grep in two concurrent child processes.

    Returns the exit codes of the copy child and the grep child.
    """
    children = [
        multiprocessing.Process(target=_copy_child, args=(copy_source, copy_destination)),
        multiprocessing.Process(target=_grep_child, args=(grep_path, grep_word)),
    ]
    for child in children:
        child.start()
    for child in children:
        child.join()
    copy_code, grep_code = (child.exitcode for child in children)
    return copy_code, grep_code


def copy_main(argv: Sequence[str] | None = None) -> int:
    """Copy one file to another."""
    parser = argparse.ArgumentParser(prog="ossim-copy", description="Copy a file.")
    parser.add_argument("source")
    parser.add_argument("destination")
    args = parser.parse_args(argv)
    try:
        copy_file(args.source, args.destination)
    except OSError as exc:
        print(f"error opening: {exc}", file=sys.stderr)
        return 1
    return 0


def grep_main(argv: Sequence[str] | None = None) -> int:
    """Print "found" once for every line of a file containing a word."""
    parser = argparse.ArgumentParser(
        prog="ossim-grep", description="Look for a word in a file."
    )
    parser.add_argument("path")
    parser.add_argument("word")
    args = parser.parse_args(argv)
    try:
        matches = grep_lines(args.path, args.word)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for _ in matches:
        print("found")
    return 0


def pipe_main(argv: Sequence[str] | None = None) -> int:
    """Have a child process upper-case a message and print its reply."""
    parser = argparse.ArgumentParser(
        prog="ossim-pipe", description="Upper-case a message in a child process."
    )
    parser.add_argument("message")
    args = parser.parse_args(argv)
    try:
        result = uppercase_via_child(args.message)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Parent received from child: {result}")
    return 0


def _do_copy(source: str, destination: str) -> None:
    print(f"Child (cp) PID: {os.getpid()}")
    try:
        copy_file(source, destination)
    except OSError as exc:
        print(f"Error copying file: {exc}")
        return
    print("File successfully copied.")
    print(f"File copied from {source} to {destination}")


def _do_count(path: str, word: str) -> None:
    print(f"Child (grep) PID: {os.getpid()}")
    try:
        count = count_word(path, word)
    except OSError as exc:
        print(f"Error opening file: {exc}")
        return
    if count > 0:
        print(f"The word '{word}' appeared {count} times in the file.")
    else:
        print("Word not found in the file.")
    print("Grep search complete.")


def _do_list(path: str) -> None:
    try:
        names = list_directory(path)
    except OSError as exc:
        print(f"Error listing directory: {exc}")
        return
    for name in names:
        print(name)
    print("File listing complete.")


_MENU = """
===== Linux Command Simulator =====
1. Copy File (cp)
2. Search Word in File (grep)
3. List Files in Directory (ls)
4. Exit"""


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _menu() -> int:
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            raise EOFError("input ended")
        return token

    try:
        while True:
            print(_MENU)
            choice = ask("Enter your choice: ")
            if choice == "1":
                source = ask("Enter source filename: ")
                _do_copy(source, ask("Enter destination filename: "))
            elif choice == "2":
                path = ask("Enter filename: ")
                _do_count(path, ask("Enter word to search: "))
            elif choice == "3":
                _do_list(ask("Enter directory to list: "))
            elif choice == "4":
                print(f"Exiting... PID: {os.getpid()}")
                return 0
            else:
                print("Invalid choice. Try again.")
    except EOFError:
        print("\nError: unexpected end of input", file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """File tool commands; with no command, an interactive menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="ossim-files", description="Copy, search and list files."
    )
    commands = parser.add_subparsers(dest="command")
    copy = commands.add_parser("copy", help="copy a file")
    copy.add_argument("source")
    copy.add_argument("destination")
    count = commands.add_parser("count", help="count a word in a file")
    count.add_argument("path")
    count.add_argument("word")
    grep = commands.add_parser("grep", help="report lines containing a word")
    grep.add_argument("path")
    grep.add_argument("word")
    listing = commands.add_parser("ls", help="list a directory")
    listing.add_argument("path")
    upper = commands.add_parser("upper", help="upper-case a message in a child")
    upper.add_argument("message")
    both = commands.add_parser("run", help="copy and grep in two child processes")
    both.add_argument("copy_source")
    both.add_argument("copy_destination")
    both.add_argument("grep_path")
    both.add_argument("grep_word")
    args = parser.parse_args(argv)

    if args.command is None:
        return _menu()
    if args.command == "copy":
        return copy_main([args.source, args.destination])
    if args.command == "grep":
        return grep_main([args.path, args.word])
    if args.command == "upper":
        return pipe_main([args.message])
    if args.command == "count":
        _do_count(args.path, args.word)
        return 0
    if args.command == "ls":
        _do_list(args.path)
        return 0
    codes = run_copy_and_grep(
        args.copy_source, args.copy_destination, args.grep_path, args.grep_word
    )
    if codes == (0, 0):
        print("Both processes executed successfully.")
        return 0
    print(f"Child processes failed with exit codes {codes[0]} and {codes[1]}.")
    return 1


if __name__ == "__main__":
    sys.exit(main())