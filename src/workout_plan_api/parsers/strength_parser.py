"""
Strength Parser

Parses armor/strength sections line by line. Header lines open a block
(superset, standard exercise, finisher), checked in that order. Every other
line continues the block opened last: rest overrides, superset rep
breakdowns, bulleted superset members, or plain tips. Lines seen before the
first header are held and attached as tips to the first block.

Examples of recognised headers:
    1. Back Squat: 5 sets x 5 reps Rest: 90 sec
    • Deadlift: 3 sets x 5,3,1 reps
    2. Superset (Curl + Press): 4 Sets, Rest: 60 sec
    Finisher: Push-ups to failure
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .base import BaseSectionParser
from .models import (
    CatalogEntry,
    ChecklistExerciseBlock,
    SupersetBlock,
    SupersetExercise,
)
from .xp_factor import resolve_xp_factor
from workout_plan_api.utils import to_int, floor_xp

logger = logging.getLogger(__name__)

StrengthBlock = Union[ChecklistExerciseBlock, SupersetBlock]

# XP constants
XP_PER_SET = 10               # standard exercise: sets * 10 * factor
XP_PER_SUPERSET_EXERCISE = 15  # superset: sets * exercises * 15
FINISHER_XP = 100

DEFAULT_SUPERSET_SETS = 3
DEFAULT_REPS = "10"
DEFAULT_SUPERSET_NAMES = ["Exercise 1", "Exercise 2"]

ENGINE_MARKER = "The Engine:"
LIFT_HEADER_MARKER = "The Lift"
BULLETS = ("◦", "•")


@dataclass
class SectionState:
    """Accumulator for one parse call"""
    section: str
    blocks: List[StrengthBlock] = field(default_factory=list)
    current: Optional[StrengthBlock] = None
    pending_tips: List[str] = field(default_factory=list)
    exercise_index: int = 0

    def emit(self, block: StrengthBlock) -> StrengthBlock:
        """Append a new block; it becomes the target for continuation lines"""
        block.tips = self.pending_tips + block.tips
        self.pending_tips = []
        self.blocks.append(block)
        self.current = block
        return block


class StrengthParser(BaseSectionParser):
    """Parser for [STRENGTH] / [ARMOR] / [CORE] sections"""

    # "1. Back Squat: 5 sets ..." / "• Row: 3 set"
    STANDARD_PATTERN = re.compile(r'^(\d+\.|[•◦-])?\s*(.*?):\s+(\d+)\s+sets?', re.IGNORECASE)
    # "2. Superset (Curl + Press) ..." / "Giant Set (...)" / "Tri-Set (...)"
    SUPERSET_PATTERN = re.compile(r'^(\d+\.|[•◦-])?\s*(?:Superset|Giant Set|Tri-Set)\s+\((.*?)\)', re.IGNORECASE)
    FINISHER_PATTERN = re.compile(r'^(\d+\.|[•◦-])?\s*Finisher', re.IGNORECASE)
    SETS_PATTERN = re.compile(r'(\d+)\s*Sets?', re.IGNORECASE)
    REPS_PATTERN = re.compile(r'x\s*([\d,\s]+)\s*reps', re.IGNORECASE)  # "x 5 reps", "x 5,3,1 reps"
    TIP_PREFIX_PATTERN = re.compile(r'Tip:', re.IGNORECASE)
    FORM_PREFIX_PATTERN = re.compile(r'Form:', re.IGNORECASE)

    default_section = "Strength Protocol"

    def __init__(self, catalog: Sequence[CatalogEntry] = ()):
        super().__init__()
        self.catalog = list(catalog)

        # Header rules, first match opens the block
        self.header_rules: List[Tuple[re.Pattern, Callable]] = [
            (self.SUPERSET_PATTERN, self._build_superset),
            (self.STANDARD_PATTERN, self._build_standard),
            (self.FINISHER_PATTERN, self._build_finisher),
        ]

        # Continuation rules: (predicate, handler). A handler returning True
        # consumes the line; otherwise the next rules still see it and the
        # line ends up as a tip.
        self.continuation_rules: List[Tuple[Callable, Callable]] = [
            (self._is_lift_header, lambda line, state: True),
            (lambda line, state: state.current is None, self._hold_tip),
            (lambda line, state: self.REST_PATTERN.search(line) is not None, self._apply_rest),
            (self._is_superset_reps, self._apply_superset_reps),
            (self._is_superset_bullet, self._apply_superset_bullet),
        ]

    def parse(self, text: str, section_name: str = None) -> List[StrengthBlock]:
        state = SectionState(section=section_name or self.default_section)

        for line in self.iter_lines(text):
            if ENGINE_MARKER in line:
                state.section = "Engine"

            if not self._open_block(line, state):
                self._continue_block(line, state)

        if state.pending_tips:
            self.add_warning(
                f"{len(state.pending_tips)} line(s) in {state.section} section never reached an exercise"
            )

        logger.debug(f"Parsed {len(state.blocks)} strength block(s) for {state.section}")
        return state.blocks

    # ------------------------------------------------------------------
    # Header lines
    # ------------------------------------------------------------------

    def _open_block(self, line: str, state: SectionState) -> bool:
        for pattern, build in self.header_rules:
            match = pattern.match(line)
            if match:
                state.exercise_index += 1
                state.emit(build(match, line, state))
                return True
        return False

    def _build_superset(self, match: re.Match, line: str, state: SectionState) -> SupersetBlock:
        content = match.group(2)
        names = [n.strip() for n in content.split('+')] if content else list(DEFAULT_SUPERSET_NAMES)

        sets_match = self.SETS_PATTERN.search(line)
        sets = int(sets_match.group(1)) if sets_match else DEFAULT_SUPERSET_SETS

        exercises = [SupersetExercise(name=name, reps=DEFAULT_REPS, sets=sets) for name in names]

        return SupersetBlock(
            name=line.split(':')[0].strip() if ':' in line else line,
            section=state.section,
            sets=sets,
            rest_seconds=self.parse_rest_seconds(line),
            exercises=exercises,
            xp_value=superset_xp(sets, len(exercises)),
            description=line,
        )

    def _build_standard(self, match: re.Match, line: str, state: SectionState) -> ChecklistExerciseBlock:
        prefix, name, sets = match.group(1), match.group(2), int(match.group(3))
        factor = resolve_xp_factor(name, self.catalog)

        reps_display = DEFAULT_REPS
        reps_list = None
        reps_match = self.REPS_PATTERN.search(line)
        if reps_match:
            reps_display = reps_match.group(1).strip()
            if ',' in reps_display:
                reps_list = [r for r in (to_int(part) for part in reps_display.split(',')) if r is not None]

        if reps_list:
            xp = floor_xp(sum(reps_list) * factor)
        else:
            xp = floor_xp(sets * XP_PER_SET * factor)

        display_prefix = prefix if prefix and re.search(r'\d', prefix) else f"{state.exercise_index}."

        return ChecklistExerciseBlock(
            name=f"{display_prefix} {name}",
            section=state.section,
            sets=sets,
            reps_per_set=reps_display,
            reps_list=reps_list,
            rest_seconds=self.parse_rest_seconds(line),
            xp_value=xp,
            description=line,
        )

    def _build_finisher(self, match: re.Match, line: str, state: SectionState) -> ChecklistExerciseBlock:
        return ChecklistExerciseBlock(
            name="Finisher",
            section=state.section,
            sets=1,
            reps_per_set="Failure",
            xp_value=FINISHER_XP,
            description=line,
        )

    # ------------------------------------------------------------------
    # Continuation lines
    # ------------------------------------------------------------------

    def _continue_block(self, line: str, state: SectionState):
        for matches, handle in self.continuation_rules:
            if matches(line, state) and handle(line, state):
                return
        state.current.tips.append(self._clean_tip(line))

    def _is_lift_header(self, line: str, state: SectionState) -> bool:
        return LIFT_HEADER_MARKER in line

    def _is_superset_reps(self, line: str, state: SectionState) -> bool:
        return isinstance(state.current, SupersetBlock) and 'Reps:' in line

    def _is_superset_bullet(self, line: str, state: SectionState) -> bool:
        return (
            isinstance(state.current, SupersetBlock)
            and 'Reps:' not in line
            and line.startswith(BULLETS)
            and ':' in line
        )

    def _hold_tip(self, line: str, state: SectionState) -> bool:
        state.pending_tips.append(line)
        return True

    def _apply_rest(self, line: str, state: SectionState) -> bool:
        state.current.rest_seconds = self.parse_rest_seconds(line)
        return False

    def _apply_superset_reps(self, line: str, state: SectionState) -> bool:
        """'Reps: 12/10' assigns positionally; fewer parts than exercises applies to all"""
        block = state.current
        reps_content = line.split('Reps:')[1].split('(')[0].strip()
        parts = reps_content.split('/')

        if len(parts) >= len(block.exercises):
            for exercise, reps in zip(block.exercises, parts):
                exercise.reps = reps.strip()
        else:
            for exercise in block.exercises:
                exercise.reps = reps_content
        return False

    def _apply_superset_bullet(self, line: str, state: SectionState) -> bool:
        """'◦ Curl: 12 reps' lists the superset members explicitly"""
        block = state.current

        if not block.has_bullet_exercises:
            if len(block.exercises) != 1:
                # Inline names already list the members; keep the line as a tip
                return False
            block.exercises = []
            block.has_bullet_exercises = True

        name, _, reps = line.partition(':')
        for bullet in BULLETS:
            name = name.replace(bullet, '')

        block.exercises.append(SupersetExercise(name=name.strip(), reps=reps.strip(), sets=block.sets))
        return True

    def _clean_tip(self, line: str) -> str:
        line = self.TIP_PREFIX_PATTERN.sub('', line, count=1)
        return self.FORM_PREFIX_PATTERN.sub('', line, count=1).strip()


def superset_xp(sets: int, exercise_count: int) -> int:
    """Flat superset estimate"""
    return sets * exercise_count * XP_PER_SUPERSET_EXERCISE


def parse_strength_section(
    text: str,
    section_name: str = "Strength Protocol",
    catalog: Sequence[CatalogEntry] = (),
) -> List[StrengthBlock]:
    """Parse strength text into checklist/superset blocks"""
    return StrengthParser(catalog).parse(text, section_name)
