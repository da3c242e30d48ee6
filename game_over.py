#game_over.py

from needs import BASE_NEEDS, vitamin_letter

BASIC_NEEDS_REASON = "lack of basic needs"

def evaluate_game_over(needs):
    """
    Returns the terminal reason for a NeedsState, or None while the player survives.
    Base needs are checked before vitamins; the first depleted channel wins.
    """
    for name in BASE_NEEDS:
        if getattr(needs, name) <= needs.min_value:
            return BASIC_NEEDS_REASON

    for i, value in enumerate(needs.vitamins):
        if value <= needs.min_value:
            return f"vitamin {vitamin_letter(i)} deficiency"

    return None

def format_game_over_message(reason):
    return f"You died from {reason}"
