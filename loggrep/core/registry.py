"""Registry of built-in log formats.

The registry is an ordered, read-only collection of FormatTemplate objects.
Order matters: autodetection tries templates in registry order and picks the
first that accepts the sample line, so more specific formats come first.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from loggrep.errors import FormatNotFoundError
from loggrep.models.template import FormatTemplate

# $remote_addr - $remote_user [$time_local] "$request" $status $body_bytes_sent "$http_referer" "$http_user_agent"
NGINX = FormatTemplate(
    name="nginx",
    description="nginx access log (default 'combined' log_format)",
    pattern=(
        r'(?P<remote_addr>\S+) - (?P<remote_user>\S+) \[[^\]]+\] '
        r'"(?P<request>[^"]*)" (?P<status>\d{3}) (?P<body_bytes_sent>\d+) '
        r'"(?P<http_referer>[^"]*)" "(?P<user_agent>.*)"'
    ),
)

# <PRI>Mmm dd hh:mm:ss HOSTNAME MSG (RFC 3164)
SYSLOG_BSD = FormatTemplate(
    name="syslog-bsd",
    description="BSD syslog message (RFC 3164)",
    pattern=(
        r"<(?P<priority>\d{1,3})>"
        r"(?P<timestamp>[A-Z][a-z]{2} [ \d]\d \d{2}:\d{2}:\d{2}) "
        r"(?P<hostname>\S+) (?P<message>.*)"
    ),
)

# logging.BASIC_FORMAT: %(levelname)s:%(name)s:%(message)s
PYTHON = FormatTemplate(
    name="python",
    description="Python logging with the default basicConfig format",
    pattern=r"(?P<levelname>[A-Z]+):(?P<name>[^:\s]+):(?P<message>.*)",
)

# log_line_prefix = '%m [%p] %q%u@%d '
POSTGRESQL = FormatTemplate(
    name="postgresql",
    description="PostgreSQL server log (log_line_prefix '%m [%p] %q%u@%d ')",
    pattern=(
        r"(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}(?:\.\d+)? \S+) "
        r"\[(?P<pid>\d+)\] "
        r"(?:(?P<user>[^@\s]*)@(?P<database>\S*) )?"
        r"(?P<type>[A-Z]+):\s+(?P<message>.*)"
    ),
)

UPDATE_ALTERNATIVES = FormatTemplate(
    name="update-alternatives",
    description="Debian alternatives.log",
    pattern=(
        r"update-alternatives (?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}): "
        r"(?P<message>.*)"
    ),
)

# See dpkg(1), section "FILES": four line shapes after the timestamp.
DPKG = FormatTemplate(
    name="dpkg",
    description="Debian dpkg.log",
    pattern=(
        r"(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) "
        r"(?:"
        r"startup (?P<type>archives|packages) (?P<command>\S+)"
        r"|status (?P<state>\S+) (?P<pkg>\S+) (?P<installed_version>\S+)"
        r"|(?P<action>install|upgrade|configure|trigproc|disappear|remove|purge) "
        r"(?P<pkg_2>\S+) (?P<installed_version_2>\S+) (?P<available_version>\S+)"
        r"|conffile (?P<filename>\S+) (?P<decision>install|keep)"
        r")"
    ),
)

# host ident authuser [date] "request" status bytes ["referer" "user-agent"]
# The combined suffix is optional and only loosely delimited from bytes.
CLF = FormatTemplate(
    name="clf",
    description="Common Log Format, with the optional Combined Log Format suffix",
    pattern=(
        r'(?P<host>\S+) (?P<ident>\S+) (?P<auth_user>\S+) '
        r'\[(?P<timestamp>[^\]]+)\] "(?P<request>[^"]*)" '
        r'(?P<status>\d{3}) (?P<bytes>\S+)'
        r'(?: "(?P<referer>.*)" "(?P<user_agent>.*)")?'
    ),
)

BUILTIN_TEMPLATES: tuple[FormatTemplate, ...] = (
    NGINX,
    SYSLOG_BSD,
    PYTHON,
    POSTGRESQL,
    UPDATE_ALTERNATIVES,
    DPKG,
    CLF,
)


class FormatRegistry:
    """Ordered, read-only mapping of format name to FormatTemplate.

    Example:
        registry = FormatRegistry(BUILTIN_TEMPLATES)
        template = registry.lookup("nginx")

        for name, template in registry.items():
            print(name, template.field_names)
    """

    def __init__(self, templates: Iterable[FormatTemplate]) -> None:
        """Initialize the registry.

        Args:
            templates: Templates in detection order.

        Raises:
            ValueError: If two templates share a name.
        """
        self._templates: dict[str, FormatTemplate] = {}
        for template in templates:
            if template.name in self._templates:
                raise ValueError(f"Duplicate format name: {template.name}")
            self._templates[template.name] = template

    def __iter__(self) -> Iterator[FormatTemplate]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def names(self) -> list[str]:
        """List format names in registry order."""
        return list(self._templates)

    def items(self) -> list[tuple[str, FormatTemplate]]:
        """List (name, template) pairs in registry order."""
        return list(self._templates.items())

    def lookup(self, name: str) -> FormatTemplate:
        """Get a template by name.

        Args:
            name: The format name.

        Returns:
            The registered template.

        Raises:
            FormatNotFoundError: If no format has this name.
        """
        try:
            return self._templates[name]
        except KeyError:
            raise FormatNotFoundError(name, self.names()) from None


DEFAULT_REGISTRY = FormatRegistry(BUILTIN_TEMPLATES)
