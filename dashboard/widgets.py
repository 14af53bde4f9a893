"""Reusable report widgets."""
from dashboard.theme import CONFIDENCE_COLORS, SIDE_COLORS, TEXT_DIM

SPARK_CHARS = "▁▂▃▄▅▆▇█"


def sparkline(values, width=20):
    """Generate Unicode sparkline from a list of values."""
    if not values:
        return ""
    vals = [v for v in values if v is not None]
    if not vals:
        return ""
    # Subsample if longer than width
    if len(vals) > width:
        step = len(vals) / width
        vals = [vals[int(i * step)] for i in range(width)]
    mn, mx = min(vals), max(vals)
    rng = mx - mn if mx != mn else 1
    return "".join(SPARK_CHARS[min(7, int((v - mn) / rng * 7))] for v in vals)


def confidence_bar(level):
    """Three-segment meter: High fills all, Medium two, Low one."""
    filled = {"High": 3, "Medium": 2, "Low": 1}.get(level, 0)
    color = CONFIDENCE_COLORS.get(level, TEXT_DIM)
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * (3 - filled)}[/dim] [{color}]{level}[/{color}]"


def side_mark(side, column):
    """Check mark when a rule's points went to this column's side."""
    if side == column:
        color = SIDE_COLORS[column]
        return f"[{color}]●[/{color}]"
    return "[dim]○[/dim]"
