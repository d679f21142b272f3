"""Stat inspection utility for ninewire developers.

Builds a stat record from command-line fields and prints its wire
layout, or decodes hex captured off the wire (one record or the
back-to-back records of a directory read) and prints them as JSON.

    python -m ninewire.tools.stat_debug --name motd --uid glenda --length 42
    python -m ninewire.tools.stat_debug --decode "31 00 00 00 ..."
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import msgspec
from marshmallow import ValidationError

from ninewire import const
from ninewire.buffer import Cursor
from ninewire.config.logging import configure_logging
from ninewire.config.model import CodecSettings
from ninewire.config.settings import load_settings
from ninewire.errors import MalformedInputError
from ninewire.protocol import Qid, Stat

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StatDebugSnapshot:
    name: str
    size: int
    declared_length: int
    qid_hex: str
    encoded: bytes
    encoded_hex: str

    def render(self) -> str:
        return (
            "[StatDebug] --- Snapshot ---\n"
            f"name={self.name}\n"
            f"size={self.size}\n"
            f"declared_length={self.declared_length}\n"
            f"qid={self.qid_hex}\n"
            f"encoded={self.encoded_hex}"
        )


def _parse_hex(hex_string: str | None) -> bytes:
    if not hex_string:
        return b""
    compact = "".join(hex_string.split())
    if compact.startswith("0x") or compact.startswith("0X"):
        compact = compact[2:]
    if len(compact) % 2:
        raise ValueError("hex must contain an even number of digits")
    try:
        return bytes.fromhex(compact)
    except ValueError as exc:
        raise ValueError(f"Invalid hex '{hex_string}': {exc}") from exc


def _parse_qid(candidate: str | None) -> Qid:
    """Accept 26 hex digits or ``type:version:path``."""
    if not candidate:
        return Qid.zero()
    if ":" in candidate:
        parts = candidate.split(":")
        if len(parts) != 3:
            raise ValueError("qid must be 'type:version:path'")
        try:
            qtype, version, path = (int(part, 0) for part in parts)
        except ValueError as exc:
            raise ValueError(f"Invalid qid '{candidate}': {exc}") from exc
        return Qid.from_fields(qtype, version, path)
    raw = _parse_hex(candidate)
    if len(raw) != const.QID_SIZE:
        raise ValueError(f"qid must be {const.QID_SIZE} bytes, got {len(raw)}")
    return Qid(raw)


def _hex_with_spacing(data: bytes) -> str:
    return " ".join(f"{byte:02X}" for byte in data)


def build_snapshot(stat: Stat) -> StatDebugSnapshot:
    encoded = stat.encode()
    size = Stat.sizeof(stat)
    return StatDebugSnapshot(
        name=stat.name,
        size=size,
        declared_length=size - const.STAT_LENGTH_SIZE,
        qid_hex=stat.qid.hex(),
        encoded=encoded,
        encoded_hex=_hex_with_spacing(encoded),
    )


def decode_stats(data: bytes, strict: bool = False) -> list[Stat]:
    return Stat.read_all(Cursor(data), strict=strict)


def _int_literal(value: str) -> int:
    try:
        candidate = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'") from exc
    if candidate < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return candidate


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build or decode 9P2000 stat records.",
    )
    parser.add_argument(
        "--decode",
        "-d",
        metavar="HEX",
        help="Decode stat records from a hex string (spaces allowed) and print JSON.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject records whose declared length does not match their body.",
    )
    parser.add_argument("--config", help="Optional TOML settings file.")
    parser.add_argument("--name", default="", help="File name.")
    parser.add_argument("--uid", default="", help="Owner name.")
    parser.add_argument("--gid", default="", help="Group name.")
    parser.add_argument("--muid", default="", help="Last modifier name.")
    parser.add_argument("--type", type=_int_literal, default=0, help="Server type.")
    parser.add_argument("--dev", type=_int_literal, default=0, help="Server subtype.")
    parser.add_argument(
        "--qid",
        help="Qid as 26 hex digits or 'type:version:path' (default: all zero).",
    )
    parser.add_argument("--mode", type=_int_literal, default=0, help="Mode bits, e.g. 0o644.")
    parser.add_argument("--atime", type=_int_literal, default=0, help="Access time.")
    parser.add_argument("--mtime", type=_int_literal, default=0, help="Modification time.")
    parser.add_argument("--length", type=_int_literal, default=0, help="File length.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else CodecSettings()
    except (ValidationError, ValueError) as exc:
        parser.error(f"invalid settings: {exc}")
    configure_logging(settings)
    strict = args.strict or settings.strict_stat_length

    if args.decode is not None:
        try:
            data = _parse_hex(args.decode)
        except ValueError as exc:
            parser.error(str(exc))
        try:
            stats = decode_stats(data, strict=strict)
        except MalformedInputError as exc:
            print(f"[StatDebug] Failed to decode: {exc}", file=sys.stderr)
            return 1
        logger.debug("Decoded %d stat record(s) from %d bytes", len(stats), len(data))
        print(msgspec.json.encode([stat.to_dict() for stat in stats]).decode("utf-8"))
        return 0

    try:
        stat = Stat(
            type=args.type,
            dev=args.dev,
            qid=_parse_qid(args.qid),
            mode=args.mode,
            atime=args.atime,
            mtime=args.mtime,
            length=args.length,
            name=args.name,
            uid=args.uid,
            gid=args.gid,
            muid=args.muid,
        )
        snapshot = build_snapshot(stat)
    except (ValueError, MalformedInputError) as exc:
        parser.error(str(exc))
    print(snapshot.render())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
