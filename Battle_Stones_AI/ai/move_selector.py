"""Candidate move generation (stone neighbourhood, canonical opening points)."""


LARGE_BOARD = 9
STAR_OFFSET_LARGE = 3  # 4-4 point on 13x13 and up
STAR_OFFSET_MEDIUM = 2  # 3-3 point on 9x9..12x12


def opening_points(size):
    """Center on small boards; center plus the four star points on larger ones."""
    center = size // 2
    points = [(center, center)]
    if size >= LARGE_BOARD:
        offset = STAR_OFFSET_LARGE if size >= 13 else STAR_OFFSET_MEDIUM
        far = size - 1 - offset
        points += [(offset, offset), (far, offset), (offset, far), (far, far)]
    return points


def generate_candidates(board, radius=2):
    """
    Return empty cells within Chebyshev `radius` of any stone, in board order.
    - If board empty: canonical opening points.
    - If nothing is in range (near-full board): every empty cell.
    """
    size = board.size
    cells = board.cells
    if board.is_blank():
        return opening_points(size)

    seen = set()
    for index, value in enumerate(cells):
        if value == 0:
            continue
        ox, oy = index % size, index // size
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                nx, ny = ox + dx, oy + dy
                if nx < 0 or nx >= size or ny < 0 or ny >= size:
                    continue
                n = ny * size + nx
                if cells[n] == 0:
                    seen.add(n)

    if not seen:
        return board.empty_points()
    return [(n % size, n // size) for n in sorted(seen)]


def local_candidates(board, point, radius=2):
    """Empty cells within Chebyshev `radius` of a single point."""
    x0, y0 = point
    out = []
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            nx, ny = x0 + dx, y0 + dy
            if board.is_empty(nx, ny):
                out.append((nx, ny))
    return out
