"""
Print Keccak / SHA-3 checksums, sha256sum style.

  keccaksum -a 512 file.txt
  echo -n abc | keccaksum --sha3
  keccaksum --check -s "hello"   # also compare with a reference library
"""
import argparse
import logging
import sys
from typing import BinaryIO, Iterable, Optional

from keccak import PARAMETERS, Keccak, Sha3


logger = logging.getLogger(__name__)

CHUNK_SIZE: int = 64 * 1024


def _build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keccaksum", description="Print Keccak or SHA-3 checksums")
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="files to hash; '-' or none reads stdin")
    parser.add_argument("-a", "--algorithm", type=int, default=256, choices=sorted(PARAMETERS),
                        help="digest size in bits (default: 256)")
    parser.add_argument("--sha3", action="store_true",
                        help="use FIPS 202 SHA-3 padding instead of the original Keccak padding")
    parser.add_argument("-s", "--string", help="hash this text (UTF-8) instead of files")
    parser.add_argument("--check", action="store_true",
                        help="recompute with a reference library and fail on mismatch")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


class _Job:
    """Our digest and, with --check, the reference one, fed side by side."""

    def __init__(self, sha3: bool, bits: int, check: bool) -> None:
        self.ours = (Sha3 if sha3 else Keccak)(bits)
        self.ref = None
        if check:
            # reference libraries are only needed with --check
            from keccak_reference import reference
            self.ref = reference(self.ours.family, bits)
            logger.debug("cross-checking %s against %s", self.ours.name, type(self.ref).__name__)

    def update(self, data: bytes) -> None:
        self.ours.update(data)
        if self.ref is not None:
            self.ref.update(data)

    def finish(self, label: str) -> bool:
        digest = self.ours.digest()
        print(f"{digest.hex()}  {label}")
        if self.ref is None:
            return True
        expected = self.ref.finalize()
        if digest != expected:
            logger.error("%s: %s mismatch, reference gives %s", label, self.ours.name, expected.hex())
            return False
        return True


def _hash_stream(job: _Job, stream: BinaryIO) -> None:
    for chunk in iter(lambda: stream.read(CHUNK_SIZE), b""):
        job.update(chunk)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_cli()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    if args.string is not None:
        if args.files:
            parser.error("--string and FILE are mutually exclusive")
        job = _Job(args.sha3, args.algorithm, args.check)
        job.update(args.string.encode("utf-8"))
        return 0 if job.finish(f'"{args.string}"') else 1

    status = 0
    for name in args.files or ["-"]:
        job = _Job(args.sha3, args.algorithm, args.check)
        if name == "-":
            logger.debug("hashing stdin")
            _hash_stream(job, sys.stdin.buffer)
        else:
            logger.debug("hashing %s", name)
            try:
                with open(name, "rb") as f:
                    _hash_stream(job, f)
            except OSError as e:
                logger.error("%s: %s", name, e.strerror or e)
                status = 1
                continue
        if not job.finish(name):
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
