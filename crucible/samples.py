"""
Sample puzzle grids with their known answers.
"""

SAMPLE_GRID = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

# Second sample: the only cheap route is one long straight row
STRAIGHT_LINE_GRID = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""

SAMPLE_ANSWERS = {
    "part1": 102,
    "part2": 94,
}

STRAIGHT_LINE_ANSWERS = {
    "part2": 71,
}
