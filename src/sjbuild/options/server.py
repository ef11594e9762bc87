"""
Server settings carried by the --server: option.

    --server:portfile=/tmp/javac.port,sjavac=/usr/bin/sjavac,poolsize=8

The option string is read with the sub-option extractors; any key the
string leaves out falls back to the configured server defaults.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from sjbuild.config import SjbuildConfig, get_config
from sjbuild.options.suboptions import (
    SEPARATOR,
    clean_sub_options,
    extract_boolean_option,
    extract_int_option,
    extract_string_option,
)


# Sub-options understood by the server
SERVER_SUB_OPTIONS: FrozenSet[str] = frozenset({
    "portfile",
    "sjavac",
    "id",
    "poolsize",
    "keepalive",
    "background",
})


def strip_flag_prefix(text: str, prefix: str) -> str:
    """
    Remove a leading flag such as '--server:' if present.

    Any other dash-led flag ('-server:') is stripped up to its first ':',
    as long as that colon comes before the first '='.
    """
    if text.startswith(prefix):
        return text[len(prefix):]
    if text.startswith("-"):
        colon = text.find(":")
        assign = text.find("=")
        if colon != -1 and (assign == -1 or colon < assign):
            return text[colon + 1:]
    return text


@dataclass(frozen=True)
class ServerSettings:
    """Typed view of a server option string."""
    portfile: Optional[str]
    sjavac: str
    id: Optional[str]
    poolsize: int
    keepalive: int
    background: bool

    @classmethod
    def from_option_string(
        cls,
        text: Optional[str],
        config: Optional[SjbuildConfig] = None,
    ) -> "ServerSettings":
        """
        Build settings from '--server:...' or a bare 'key=value,...' string.

        Unknown sub-options are ignored.
        """
        cfg = config or get_config()
        source = None
        if text is not None:
            source = clean_sub_options(
                SERVER_SUB_OPTIONS,
                strip_flag_prefix(text, cfg.server_flag_prefix),
            )

        return cls(
            portfile=extract_string_option("portfile", source),
            sjavac=extract_string_option("sjavac", source, cfg.sjavac),
            id=extract_string_option("id", source),
            poolsize=extract_int_option("poolsize", source, cfg.poolsize),
            keepalive=extract_int_option("keepalive", source, cfg.keepalive),
            background=extract_boolean_option("background", source, cfg.background),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "portfile": self.portfile,
            "sjavac": self.sjavac,
            "id": self.id,
            "poolsize": self.poolsize,
            "keepalive": self.keepalive,
            "background": self.background,
        }

    def to_option_string(self) -> str:
        """Render as 'key=value,...', skipping unset string settings."""
        parts = []
        for key, value in self.to_dict().items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            parts.append(f"{key}={value}")
        return SEPARATOR.join(parts)
