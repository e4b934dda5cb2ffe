"""Shareable plain-text practice summary.

The text is formatted for a chat message (WhatsApp bold markers, one fact
per line) and is the same for admins and players.
"""

from collections.abc import Iterable
from datetime import date
from typing import Any

from poloclub.engine.scoring import total_score, winner
from poloclub.models import PracticeStatus
from poloclub.schemas.practice import TeamSide

TEAM_LABELS = {
    TeamSide.A: ("🔵", "Equipo Azul", "Azul"),
    TeamSide.B: ("🔴", "Equipo Rojo", "Rojo"),
}

WEEKDAYS = ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"]
MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]

UNASSIGNED = "Por asignar"
DRAW = "Empate"


def format_date(day: date) -> str:
    """Long Spanish date, e.g. 'sábado, 12 de octubre de 2024'."""
    return f"{WEEKDAYS[day.weekday()]}, {day.day} de {MONTHS[day.month - 1]} de {day.year}"


def format_handicap(level: float) -> str:
    return f"{level:g}"


def render_summary(practice: Any, players: Iterable[Any], horses: Iterable[Any]) -> str:
    """Render the practice as a pre-formatted, line-broken message.

    Args:
        practice: Practice snapshot with ``name``, ``date``, ``status``,
            ``teams`` (Teams) and ``chukkers`` (list of Chukker)
        players: Players referenced by the teams; unknown ids are skipped
        horses: Horses referenced by the assignments

    Returns:
        Message text
    """
    players_by_id = {p.id: p for p in players}
    horses_by_id = {h.id: h for h in horses}
    roster = {
        side: [players_by_id[pid] for pid in practice.teams.members(side) if pid in players_by_id]
        for side in TeamSide
    }

    lines = [f"🏇 *{practice.name or 'Práctica'}*", f"📅 {format_date(practice.date)}", ""]

    if any(roster.values()):
        lines += ["*EQUIPOS*", ""]
        for side in TeamSide:
            if not roster[side]:
                continue
            icon, label, _ = TEAM_LABELS[side]
            team_hcp = sum(p.level or 0 for p in roster[side])
            lines.append(f"{icon} *{label}* ({format_handicap(team_hcp)} HCP)")
            for player in roster[side]:
                lines.append(f"   • {player.name} ({format_handicap(player.level or 0)} HCP)")
            lines.append("")

    if practice.chukkers and any(roster.values()):
        lines += ["*ASIGNACIÓN DE CABALLOS*", ""]
        for chukker in practice.chukkers:
            lines.append(f"*Chukker {chukker.number}*")
            for side in TeamSide:
                icon = TEAM_LABELS[side][0]
                for player in roster[side]:
                    horse = horses_by_id.get(chukker.horse_for(player.id))
                    lines.append(f"{icon} {player.name}: {horse.name if horse else UNASSIGNED}")
            lines.append("")

    if practice.status in (PracticeStatus.IN_PROGRESS.value, PracticeStatus.COMPLETED.value):
        total_a, total_b = total_score(practice.chukkers)
        blue, red = TEAM_LABELS[TeamSide.A], TEAM_LABELS[TeamSide.B]
        lines.append("*MARCADOR*")
        lines.append(f"{blue[0]} {blue[2]} {total_a} - {total_b} {red[2]} {red[0]}")

        if practice.status == PracticeStatus.COMPLETED.value:
            side = winner(practice.chukkers)
            result = f"{TEAM_LABELS[side][1]} {TEAM_LABELS[side][0]}" if side else DRAW
            lines.append(f"🏆 Ganador: {result}")

    return "\n".join(lines)
