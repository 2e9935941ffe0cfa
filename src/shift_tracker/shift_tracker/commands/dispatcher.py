from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..core.constants import DEFAULT_COMMAND_PREFIX, DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NotRegistered, StateConflictError, ValidationError
from ..engine.service import ShiftEngine

logger = logging.getLogger(__name__)

REGISTER_USAGE = "Usage: `{prefix}register <role> <email>`\nExample: `{prefix}register Manager john@company.com`"
GENERIC_FAILURE = "An error occurred. Please try again."


@dataclass(frozen=True)
class CommandReply:
    ok: bool
    text: str


@dataclass(frozen=True)
class CommandContext:
    identity: str
    display_name: str
    args: List[str]
    is_admin: bool
    now: Optional[datetime]


def _fmt_duration(total_minutes: int) -> str:
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def _fmt_ts(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC")


class CommandDispatcher:
    """Maps one inbound chat message to one ShiftEngine call.

    Domain failures become user-facing replies; anything unexpected is
    logged and answered with a generic failure so a single bad command
    never takes the process down.
    """

    def __init__(self, engine: ShiftEngine, *, prefix: str = DEFAULT_COMMAND_PREFIX):
        self._engine = engine
        self._prefix = prefix
        self._handlers: Dict[str, Callable[[CommandContext], CommandReply]] = {
            "register": self._register,
            "clockin": self._clock_in,
            "clockout": self._clock_out,
            "mystatus": self._status,
            "myshifts": self._my_shifts,
            "admin-stats": self._admin_stats,
            "help": self._help,
            "ping": self._ping,
        }

    def parse(self, text: str):
        """Split message text into (command, args); None if not a command."""
        parts = (text or "").split()
        if not parts or not parts[0].startswith(self._prefix):
            return None

        command = parts[0][len(self._prefix):].lower()
        if command not in self._handlers:
            return None
        return command, parts[1:]

    def handle(
        self,
        identity: str,
        display_name: str,
        text: str,
        *,
        is_admin: bool = False,
        now: Optional[datetime] = None,
    ) -> Optional[CommandReply]:
        parsed = self.parse(text)
        if parsed is None:
            return None

        command, args = parsed
        ctx = CommandContext(identity=identity, display_name=display_name, args=args, is_admin=is_admin, now=now)

        try:
            return self._handlers[command](ctx)
        except ValidationError as e:
            text = str(e)
            if command == "register":
                text = f"{text}\n{REGISTER_USAGE.format(prefix=self._prefix)}"
            return CommandReply(False, text)
        except StateConflictError as e:
            logger.debug("%s rejected for %s: %s", command, identity, e)
            return CommandReply(False, self._conflict_text(e))
        except Exception:
            logger.exception("Command error (%s from %s)", command, identity)
            return CommandReply(False, GENERIC_FAILURE)

    def _conflict_text(self, e: StateConflictError) -> str:
        if isinstance(e, NotRegistered):
            return f"Register first: `{self._prefix}register <role> <email>`"
        return str(e)

    def _register(self, ctx: CommandContext) -> CommandReply:
        if len(ctx.args) < 2:
            return CommandReply(False, REGISTER_USAGE.format(prefix=self._prefix))

        member = self._engine.register_staff(ctx.identity, ctx.display_name, ctx.args[0], ctx.args[1], now=ctx.now)
        return CommandReply(
            True,
            f"REGISTERED\nUser: {member.display_name}\nRole: {member.role}\nEmail: {member.contact}",
        )

    def _clock_in(self, ctx: CommandContext) -> CommandReply:
        shift = self._engine.clock_in(ctx.identity, now=ctx.now)
        return CommandReply(True, f"Clocked in successfully! {shift.display_name} ({shift.role}) started at {_fmt_ts(shift.clock_in_at)}.")

    def _clock_out(self, ctx: CommandContext) -> CommandReply:
        record = self._engine.clock_out(ctx.identity, now=ctx.now)
        return CommandReply(True, f"Clocked out! Worked {_fmt_duration(record.duration_minutes)} (total {record.duration_minutes} minutes).")

    def _status(self, ctx: CommandContext) -> CommandReply:
        st = self._engine.status(ctx.identity, now=ctx.now)
        lines = [
            f"User: {st.member.display_name}",
            f"Role: {st.member.role}",
            f"Email: {st.member.contact}",
        ]
        if st.clocked_in:
            lines += [
                "Status: CLOCKED IN",
                f"Duration: {_fmt_duration(st.elapsed_minutes)}",
                f"Clock In: {_fmt_ts(st.active.clock_in_at)}",
            ]
        else:
            lines += ["Status: CLOCKED OUT", f"Total Shifts: {st.shift_count}"]
        return CommandReply(True, "\n".join(lines))

    def _my_shifts(self, ctx: CommandContext) -> CommandReply:
        records = self._engine.history(ctx.identity, DEFAULT_HISTORY_LIMIT)
        if not records:
            return CommandReply(True, "No shift history found.")

        lines = [f"Last {len(records)} shifts"]
        lines += [f"{r.date.isoformat()} - {r.hours}h {r.minutes}m | {r.role}" for r in records]
        return CommandReply(True, "\n".join(lines))

    def _admin_stats(self, ctx: CommandContext) -> CommandReply:
        if not ctx.is_admin:
            return CommandReply(False, "Admin only.")

        stats = self._engine.admin_stats()
        return CommandReply(
            True,
            f"Staff: {stats.staff_count}\nTotal Shifts: {stats.total_shifts}\nActive Now: {stats.active_count}",
        )

    def _help(self, ctx: CommandContext) -> CommandReply:
        p = self._prefix
        return CommandReply(
            True,
            "\n".join(
                [
                    f"Register: `{p}register <role> <email>`",
                    f"Shift: `{p}clockin` - Start shift, `{p}clockout` - End shift",
                    f"Info: `{p}mystatus` - Check status, `{p}myshifts` - View history",
                    f"Admin: `{p}admin-stats` - Statistics",
                ]
            ),
        )

    def _ping(self, ctx: CommandContext) -> CommandReply:
        return CommandReply(True, "Pong! Bot is online.")
