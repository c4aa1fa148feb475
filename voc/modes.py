"""The three ways of studying a parsed vocabulary file.

Each runner reads answers through ``read_line`` (``input`` by default, which
raises ``EOFError`` at the end of input) and writes to ``out``.
"""
import logging
import queue
import random
import sys

from voc.errors import NoEligibleEntryError
from voc.screen import Screen, banner, paint

logger = logging.getLogger(__name__)

QUIT = 'q'
FORGOT = 'p'


def _ask(prompt, out, read_line):
    out.write(prompt)
    out.flush()
    return read_line()


def run_quiz(entries, read_line=input, out=None, screen=None,
             shuffle=False, retry=False, rng=None):
    """Show each word, then its definition, waiting for ENTER in between.

    Typing q at any prompt stops the quiz. With ``retry``, typing p after the
    definition puts the card back at the end of the queue.
    Returns the number of definitions revealed.
    """
    out = out or sys.stdout
    screen = screen or Screen(out)

    cards = list(entries)
    if not cards:
        print(paint("No words found in this file.", 'hint'), file=out)
        return 0
    if shuffle:
        (rng or random.Random()).shuffle(cards)

    card_queue = queue.Queue()
    for card in cards:
        card_queue.put(card)

    print(banner(f":books: {len(cards)} words loaded :books:"), file=out)
    keys = "ENTER to go on, q to quit"
    if retry:
        keys += ", p if you forgot it"
    print(paint(keys, 'hint'), file=out)

    shown = 0
    while not card_queue.empty():
        card = card_queue.get()
        try:
            answer = _ask(f"\n\nDefine {card.word} ? ", out, read_line)
            if answer.strip().lower() == QUIT:
                return shown
            answer = _ask(f"\n{card.definition} ", out, read_line)
        except EOFError:
            out.write("\n")
            return shown
        shown += 1
        answer = answer.strip().lower()
        if answer == QUIT:
            return shown
        screen.clear()
        if retry and answer == FORGOT:
            card_queue.put(card)
            print(paint(f"{card.word} goes back to the queue.", 'retry'), file=out)

    print(banner(":tada: Congratulations! You have finished this file. :tada:"), file=out)
    return shown


def run_choice(entries, read_line=input, out=None):
    """Indexed menu: a number shows that definition, a negative number leaves.

    Numbers past the end are ignored. Returns how many definitions were shown.
    """
    out = out or sys.stdout
    n = len(entries)

    for i, entry in enumerate(entries):
        out.write(f"{i} {entry.word} | ")

    shown = 0
    while True:
        try:
            raw = _ask(paint("\n ? ", 'prompt'), out, read_line)
        except EOFError:
            out.write("\n")
            break
        try:
            choice = int(raw.strip())
        except ValueError:
            print(paint(f"{raw.strip()!r} is not a number", 'hint'), file=out)
            continue

        if choice >= n:
            continue
        if choice < 0:
            break
        entry = entries[choice]
        print(f"{entry.word} -> {entry.definition}", file=out)
        shown += 1
    return shown


def run_random(entries, count, rng, out=None):
    """Print count random definitions, skipping blank or one-letter words.

    A drawn degenerate entry is replaced by the next one, wrapping around
    to the start of the list.
    """
    out = out or sys.stdout
    n = len(entries)
    if count > 0 and all(entry.is_degenerate for entry in entries):
        raise NoEligibleEntryError(n)

    printed = []
    for _ in range(count):
        i = rng.randrange(n)
        while entries[i].is_degenerate:
            i = (i + 1) % n
        entry = entries[i]
        print(f"{entry.word} -> {entry.definition}", file=out)
        printed.append(entry)
    logger.debug("printed %d random entries out of %d", len(printed), n)
    return printed
