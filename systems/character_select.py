"""
systems/character_select.py - Grid-based character creation screen.

Displays the five archetypes as cards with keyboard navigation.  Each
card keeps its own gender choice; confirming a card without one
re-prompts instead of starting the run.

Usage:
    screen = CharacterSelectScreen(surface)
    # in game loop:
    for event in pygame.event.get():
        result = screen.handle_input(event)
        if result == "confirmed":
            archetype, gender = screen.get_selection()
        elif result == "back":
            # return to title
    screen.update(dt)
    screen.draw()
"""

from __future__ import annotations

import pygame
from entities.stats import Archetype, Gender, base_attributes, derive_max_health
from errors import MissingSelection
from settings import WHITE, CLASS_DESCRIPTIONS

# ── Layout constants ──────────────────────────────────────

_COLS = 3
_CARD_W = 220
_CARD_H = 190
_PAD_X = 24
_PAD_Y = 20

# ── Colors ────────────────────────────────────────────────

_BG = (20, 20, 28)
_CARD_BG = (40, 42, 54)
_CARD_SELECTED = (70, 80, 120)
_CARD_BORDER = (90, 90, 110)
_CARD_HIGHLIGHT = (130, 160, 255)
_NAME_COLOR = (220, 220, 240)
_STAT_COLOR = (170, 180, 200)
_DESC_COLOR = (140, 145, 160)
_HINT_COLOR = (110, 110, 120)
_PROMPT_COLOR = (255, 200, 80)
_GENDER_ACTIVE = (100, 220, 160)
_GENDER_IDLE = (90, 90, 100)
_DESC_LINE_SPACING = 2         # px between wrapped description lines
_PROMPT_DURATION = 2.0         # seconds the missing-gender prompt stays up


# ══════════════════════════════════════════════════════════
#  Text Wrapping Utility
# ══════════════════════════════════════════════════════════

def render_multiline_text(
    text: str,
    font: pygame.font.Font,
    color: tuple[int, int, int],
    max_width: int,
) -> list[pygame.Surface]:
    """Word-wrap *text* and return a list of rendered line surfaces.

    Words that individually exceed *max_width* get a line of their own.
    """
    words = text.split()
    if not words:
        return []

    lines: list[pygame.Surface] = []
    current_words: list[str] = []
    for word in words:
        test_line = " ".join(current_words + [word])
        if font.size(test_line)[0] <= max_width:
            current_words.append(word)
        else:
            if current_words:
                lines.append(font.render(" ".join(current_words), True, color))
            current_words = [word]
    if current_words:
        lines.append(font.render(" ".join(current_words), True, color))
    return lines


# ══════════════════════════════════════════════════════════
#  Selection model (no drawing)
# ══════════════════════════════════════════════════════════

class CharacterCreation:
    """Cursor over the archetype cards plus each card's gender choice."""

    def __init__(self, archetypes: list[Archetype] | None = None):
        self.archetypes: list[Archetype] = archetypes or list(Archetype)
        self.index = 0
        self._genders: dict[Archetype, Gender] = {}

    @property
    def current(self) -> Archetype:
        return self.archetypes[self.index]

    def gender_for(self, archetype: Archetype) -> Gender | None:
        return self._genders.get(archetype)

    def move(self, dx: int, dy: int) -> None:
        """Move selection cursor by *dx* columns and *dy* rows."""
        rows = (len(self.archetypes) + _COLS - 1) // _COLS
        col = max(0, min(_COLS - 1, self.index % _COLS + dx))
        row = max(0, min(rows - 1, self.index // _COLS + dy))
        new_index = row * _COLS + col
        if new_index < len(self.archetypes):
            self.index = new_index

    def choose_gender(self, gender: Gender) -> None:
        # Choosing on one card leaves the other cards untouched.
        self._genders[self.current] = gender

    def confirm(self) -> tuple[Archetype, Gender]:
        """Return the chosen (archetype, gender).

        Raises MissingSelection if the current card has no gender yet.
        """
        gender = self.gender_for(self.current)
        if gender is None:
            raise MissingSelection("Please choose a gender.")
        return self.current, gender


# ══════════════════════════════════════════════════════════
#  Character Select Screen
# ══════════════════════════════════════════════════════════

class CharacterSelectScreen:
    """Card grid with keyboard navigation.

    Arrows move, M / F pick a gender, Enter confirms, ESC goes back.
    """

    def __init__(self, screen: pygame.Surface, creation: CharacterCreation | None = None):
        self.screen = screen
        self.creation = creation or CharacterCreation()
        self._selection: tuple[Archetype, Gender] | None = None
        self._prompt = ""
        self._prompt_timer = 0.0

        self._font_title = pygame.font.SysFont(None, 48)
        self._font_name = pygame.font.SysFont(None, 30)
        self._font_stat = pygame.font.SysFont(None, 20)
        self._font_desc = pygame.font.SysFont(None, 18)
        self._font_hint = pygame.font.SysFont(None, 22)

        rows = (len(self.creation.archetypes) + _COLS - 1) // _COLS
        self._grid_w = _COLS * _CARD_W + (_COLS - 1) * _PAD_X
        self._grid_h = rows * _CARD_H + (rows - 1) * _PAD_Y

        self._desc_cache: dict[Archetype, list[pygame.Surface]] = {
            a: render_multiline_text(
                CLASS_DESCRIPTIONS.get(a.value, ""), self._font_desc,
                _DESC_COLOR, _CARD_W - 16,
            )
            for a in self.creation.archetypes
        }

    # ── public API ────────────────────────────────────────

    @property
    def prompt(self) -> str:
        return self._prompt

    def update(self, dt: float) -> None:
        if self._prompt_timer > 0:
            self._prompt_timer -= dt
            if self._prompt_timer <= 0:
                self._prompt = ""

    def handle_input(self, event: pygame.event.Event) -> str | None:
        """Process a single pygame event.

        Returns
        -------
        "confirmed" – a card with a gender was confirmed.
        "back"      – player pressed ESC.
        None        – event consumed or irrelevant.
        """
        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_LEFT:
            self.creation.move(-1, 0)
        elif event.key == pygame.K_RIGHT:
            self.creation.move(1, 0)
        elif event.key == pygame.K_UP:
            self.creation.move(0, -1)
        elif event.key == pygame.K_DOWN:
            self.creation.move(0, 1)
        elif event.key == pygame.K_m:
            self.creation.choose_gender(Gender.MALE)
        elif event.key == pygame.K_f:
            self.creation.choose_gender(Gender.FEMALE)
        elif event.key == pygame.K_RETURN:
            try:
                self._selection = self.creation.confirm()
            except MissingSelection as exc:
                self._prompt = str(exc)
                self._prompt_timer = _PROMPT_DURATION
                return None
            return "confirmed"
        elif event.key == pygame.K_ESCAPE:
            return "back"
        return None

    def get_selection(self) -> tuple[Archetype, Gender] | None:
        """Return the confirmed (archetype, gender), or None."""
        return self._selection

    def draw(self) -> None:
        self.screen.fill(_BG)
        sw, sh = self.screen.get_size()
        grid_x = (sw - self._grid_w) // 2
        grid_y = (sh - self._grid_h) // 2 + 20

        title = self._font_title.render("Create Your Character", True, WHITE)
        self.screen.blit(title, ((sw - title.get_width()) // 2, 24))

        for i, archetype in enumerate(self.creation.archetypes):
            x = grid_x + (i % _COLS) * (_CARD_W + _PAD_X)
            y = grid_y + (i // _COLS) * (_CARD_H + _PAD_Y)
            self._draw_card(x, y, archetype, i == self.creation.index)

        if self._prompt:
            msg = self._font_name.render(self._prompt, True, _PROMPT_COLOR)
            self.screen.blit(msg, ((sw - msg.get_width()) // 2, 72))

        hint = self._font_hint.render(
            "Arrows: Navigate  |  M / F: Gender  |  Enter: Start  |  ESC: Back",
            True, _HINT_COLOR,
        )
        self.screen.blit(hint, ((sw - hint.get_width()) // 2, sh - 36))
        pygame.display.flip()

    # ── card rendering ────────────────────────────────────

    def _draw_card(self, x: int, y: int, archetype: Archetype, selected: bool) -> None:
        rect = pygame.Rect(x, y, _CARD_W, _CARD_H)
        pygame.draw.rect(self.screen, _CARD_SELECTED if selected else _CARD_BG,
                         rect, border_radius=8)
        pygame.draw.rect(self.screen, _CARD_HIGHLIGHT if selected else _CARD_BORDER,
                         rect, 3 if selected else 1, border_radius=8)

        name = self._font_name.render(archetype.value.title(), True, _NAME_COLOR)
        self.screen.blit(name, (x + (_CARD_W - name.get_width()) // 2, y + 10))

        attrs = base_attributes(archetype)
        lines = (
            f"STR {attrs.strength:>2}   DEX {attrs.dexterity:>2}",
            f"INT {attrs.intelligence:>2}   VIT {attrs.vitality:>2}",
            f"HP  {derive_max_health(attrs.vitality)}",
        )
        ty = y + 42
        for line in lines:
            surf = self._font_stat.render(line, True, _STAT_COLOR)
            self.screen.blit(surf, (x + 14, ty))
            ty += 18

        # Gender toggles
        chosen = self.creation.gender_for(archetype)
        gx = x + 14
        for gender in Gender:
            color = _GENDER_ACTIVE if gender is chosen else _GENDER_IDLE
            label = self._font_stat.render(gender.value.title(), True, color)
            box = pygame.Rect(gx, ty + 4, label.get_width() + 12, 20)
            pygame.draw.rect(self.screen, color, box, 1, border_radius=4)
            self.screen.blit(label, (gx + 6, ty + 7))
            gx = box.right + 8

        desc_lines = self._desc_cache.get(archetype, [])
        if desc_lines:
            line_h = desc_lines[0].get_height() + _DESC_LINE_SPACING
            dy = y + _CARD_H - len(desc_lines) * line_h - 6
            for line_surf in desc_lines:
                self.screen.blit(line_surf, (x + 8, dy))
                dy += line_h
