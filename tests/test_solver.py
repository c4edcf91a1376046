"""
Test script for solver validation

Covers:
1. CostGrid creation, bounds and immutability
2. Direction rotations and MovementState invariants
3. Transition rule under run bounds
4. Heuristic admissibility and consistency
5. A* / Dijkstra strategies on the sample grids
6. Boundary cases (single cell, unreachable target)

Usage:
    python tests/test_solver.py
    pytest tests/
"""

import heapq
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crucible.errors import InvalidConfigError, NoPathFound, OutOfBounds
from crucible.parsing import create_parser
from crucible.samples import (
    SAMPLE_ANSWERS,
    SAMPLE_GRID,
    STRAIGHT_LINE_ANSWERS,
    STRAIGHT_LINE_GRID,
)
from crucible.solver import (
    CostGrid,
    Direction,
    MovementState,
    RunBounds,
    SolutionContext,
    SolutionStatus,
    create_strategy,
    get_default_strategy_name,
    get_strategy_names,
    manhattan_distance,
    manhattan_heuristic,
    successors,
)

PART1 = RunBounds(min_run=1, max_run=3)
PART2 = RunBounds(min_run=4, max_run=10)


def _grid(text: str) -> CostGrid:
    return create_parser().parse(text).grid


def _solve(grid: CostGrid, bounds: RunBounds, strategy: str = "astar"):
    return create_strategy(strategy).solve(SolutionContext(grid=grid, bounds=bounds))


def _plain_dijkstra(grid: CostGrid) -> int:
    """Cell-level Dijkstra with no run rules, for cross-checking."""
    best = {grid.start: 0}
    heap = [(0, grid.start)]
    while heap:
        cost, (row, col) = heapq.heappop(heap)
        if (row, col) == grid.target:
            return cost
        if cost > best[(row, col)]:
            continue
        for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = (row + d_row, col + d_col)
            if not grid.in_bounds(nxt):
                continue
            new_cost = cost + grid.cost(nxt)
            if new_cost < best.get(nxt, new_cost + 1):
                best[nxt] = new_cost
                heapq.heappush(heap, (new_cost, nxt))
    raise AssertionError("plain Dijkstra could not reach the target")


def _random_grid(rng: random.Random, rows: int, cols: int, low: int = 1) -> CostGrid:
    return CostGrid.from_rows(
        [[rng.randint(low, 9) for _ in range(cols)] for _ in range(rows)]
    )


def _all_states(grid: CostGrid, bounds: RunBounds):
    for row in range(grid.rows):
        for col in range(grid.cols):
            yield MovementState.initial((row, col))
            for direction in Direction:
                for run in range(1, bounds.max_run + 1):
                    yield MovementState((row, col), direction, run)


def test_cost_grid():
    """Test CostGrid creation and methods."""
    print("\n" + "="*60)
    print("TEST: CostGrid")
    print("="*60)

    grid = CostGrid.from_rows([[1, 2, 3], [4, 5, 6]])
    print(f"  Created grid: {grid.rows}x{grid.cols}, target {grid.target}")

    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.target == (1, 2)
    assert grid.start == (0, 0)
    assert grid.min_cost == 1
    assert grid.cost((1, 1)) == 5
    assert grid.to_text() == "123\n456"

    # Out of bounds lookups
    for position in [(-1, 0), (0, 3), (2, 0)]:
        try:
            grid.cost(position)
        except OutOfBounds as e:
            assert isinstance(e, IndexError)
        else:
            raise AssertionError(f"{position} should be out of bounds")

    # Read-only backing array
    try:
        grid.costs[0, 0] = 9
    except ValueError:
        pass
    else:
        raise AssertionError("grid costs should be read-only")

    # Equality and hashing by content
    same = CostGrid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert grid == same
    assert hash(grid) == hash(same)
    assert grid != grid.with_target((0, 2))
    assert grid.with_target((0, 2)).target == (0, 2)

    # Invalid grids
    for rows in ([[1, 2], [3]], [[1, 10]]):
        try:
            CostGrid.from_rows(rows)
        except ValueError:
            pass
        else:
            raise AssertionError(f"{rows} should be rejected")

    try:
        grid.with_target((5, 5))
    except OutOfBounds:
        pass
    else:
        raise AssertionError("target outside grid should be rejected")

    print("  [PASS] CostGrid tests")


def test_direction_and_state():
    """Test Direction rotations and MovementState invariants."""
    print("\n" + "="*60)
    print("TEST: Direction / MovementState")
    print("="*60)

    assert Direction.NORTH.turn_left() is Direction.WEST
    assert Direction.NORTH.turn_right() is Direction.EAST
    assert Direction.EAST.turn_right() is Direction.SOUTH
    assert Direction.SOUTH.turn_left() is Direction.EAST
    assert Direction.WEST.reverse() is Direction.EAST
    assert Direction.NORTH.is_perpendicular_to(Direction.EAST)
    assert not Direction.NORTH.is_perpendicular_to(Direction.SOUTH)
    assert not Direction.NORTH.is_perpendicular_to(Direction.NORTH)

    for direction in Direction:
        assert direction.turn_left().turn_right() is direction
        assert direction.reverse().reverse() is direction
        assert direction.turn_left().turn_left() is direction.reverse()

    assert Direction.SOUTH.step((2, 3)) == (3, 3)
    assert Direction.WEST.step((2, 3)) == (2, 2)

    start = MovementState.initial((0, 0))
    assert start.is_initial and start.run == 0

    east = start.advance(Direction.EAST)
    assert east == MovementState((0, 1), Direction.EAST, 1)
    assert east.advance(Direction.EAST).run == 2
    assert east.advance(Direction.SOUTH) == MovementState((1, 1), Direction.SOUTH, 1)

    # Same position, different history: different search nodes
    assert MovementState((1, 1), Direction.EAST, 1) != MovementState((1, 1), Direction.EAST, 2)
    assert MovementState((1, 1), Direction.EAST, 1) != MovementState((1, 1), Direction.SOUTH, 1)
    assert len({east, MovementState((0, 1), Direction.EAST, 1)}) == 1

    for bad in [((0, 0), None, 1), ((0, 0), Direction.EAST, 0), ((0, 0), Direction.EAST, -1)]:
        try:
            MovementState(*bad)
        except ValueError:
            pass
        else:
            raise AssertionError(f"{bad} should violate the run invariant")

    print("  [PASS] Direction / MovementState tests")


def test_run_bounds():
    """Test RunBounds validation."""
    print("\n" + "="*60)
    print("TEST: RunBounds")
    print("="*60)

    for min_run, max_run in [(0, 3), (5, 4)]:
        try:
            RunBounds(min_run=min_run, max_run=max_run)
        except InvalidConfigError as e:
            print(f"  Rejected ({min_run}, {max_run}): {e}")
        else:
            raise AssertionError(f"({min_run}, {max_run}) should be rejected")

    bounds = RunBounds(min_run=4, max_run=10)
    assert bounds.can_stop(MovementState.initial((0, 0)))
    assert not bounds.can_stop(MovementState((0, 3), Direction.EAST, 3))
    assert bounds.can_stop(MovementState((0, 4), Direction.EAST, 4))

    print("  [PASS] RunBounds tests")


def test_transitions():
    """Test the transition rule."""
    print("\n" + "="*60)
    print("TEST: Transitions")
    print("="*60)

    grid = CostGrid.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    # Initial state may leave in any direction that stays on the grid
    moves = dict(successors(grid, MovementState.initial((0, 0)), PART1))
    assert moves == {
        MovementState((0, 1), Direction.EAST, 1): 2,
        MovementState((1, 0), Direction.SOUTH, 1): 4,
    }
    moves = dict(successors(grid, MovementState.initial((1, 1)), PART1))
    assert len(moves) == 4

    # At max run: must turn, never reverse
    moves = dict(successors(grid, MovementState((1, 1), Direction.EAST, 3), PART1))
    assert moves == {
        MovementState((0, 1), Direction.NORTH, 1): 2,
        MovementState((2, 1), Direction.SOUTH, 1): 8,
    }

    # Below max run: straight plus both turns
    moves = dict(successors(grid, MovementState((1, 1), Direction.EAST, 1), PART1))
    assert set(moves) == {
        MovementState((1, 2), Direction.EAST, 2),
        MovementState((0, 1), Direction.NORTH, 1),
        MovementState((2, 1), Direction.SOUTH, 1),
    }

    # Below min run: straight only
    moves = dict(successors(grid, MovementState((1, 1), Direction.EAST, 2), PART2))
    assert moves == {MovementState((1, 2), Direction.EAST, 3): 6}

    # Off-grid moves are dropped, not raised
    moves = dict(successors(grid, MovementState((0, 2), Direction.EAST, 2), PART2))
    assert moves == {}

    print("  [PASS] Transition tests")


def test_heuristic():
    """Test heuristic admissibility and consistency."""
    print("\n" + "="*60)
    print("TEST: Heuristic")
    print("="*60)

    sample = _grid(SAMPLE_GRID)
    assert manhattan_heuristic(sample, MovementState.initial((0, 0))) == 24
    assert manhattan_heuristic(sample, MovementState.initial(sample.target)) == 0

    zero_grid = CostGrid.from_rows([[0, 5], [5, 5]])
    assert manhattan_heuristic(zero_grid, MovementState.initial((0, 0))) == 0

    rng = random.Random(17)
    grids = [sample, zero_grid, _random_grid(rng, 5, 7, low=2)]
    checked = 0
    for grid in grids:
        for bounds in (PART1, PART2):
            for state in _all_states(grid, bounds):
                h = manhattan_heuristic(grid, state)
                for nxt, step_cost in successors(grid, state, bounds):
                    assert h <= step_cost + manhattan_heuristic(grid, nxt)
                    checked += 1
    print(f"  Checked {checked} edges for consistency")

    print("  [PASS] Heuristic tests")


def test_sample_grids():
    """Test both strategies against the known sample answers."""
    print("\n" + "="*60)
    print("TEST: Sample Grids")
    print("="*60)

    sample = _grid(SAMPLE_GRID)
    straight = _grid(STRAIGHT_LINE_GRID)

    for strategy in get_strategy_names():
        part1 = _solve(sample, PART1, strategy)
        part2 = _solve(sample, PART2, strategy)
        line = _solve(straight, PART2, strategy)
        print(f"  {strategy}: part1={part1.cost} part2={part2.cost} straight={line.cost}")

        assert part1.status is SolutionStatus.FOUND
        assert part1.cost == SAMPLE_ANSWERS["part1"]
        assert part2.cost == SAMPLE_ANSWERS["part2"]
        assert line.cost == STRAIGHT_LINE_ANSWERS["part2"]
        assert part1.metrics.strategy_name == strategy

    astar = _solve(sample, PART1, "astar")
    dijkstra = _solve(sample, PART1, "dijkstra")
    print(f"  Expanded: astar={astar.metrics.states_expanded} "
          f"dijkstra={dijkstra.metrics.states_expanded}")
    assert astar.metrics.states_expanded <= dijkstra.metrics.states_expanded

    print("  [PASS] Sample grid tests")


def test_path_reconstruction():
    """Test that the returned path is legal and sums to the cost."""
    print("\n" + "="*60)
    print("TEST: Path Reconstruction")
    print("="*60)

    sample = _grid(SAMPLE_GRID)
    for bounds in (PART1, PART2):
        solution = _solve(sample, bounds)
        path = solution.path

        assert path[0] == MovementState.initial(sample.start)
        assert path[-1].position == sample.target
        assert path[-1].run >= bounds.min_run
        assert solution.path_cost(sample) == solution.cost
        assert solution.positions[0] == (0, 0)
        assert solution.step_count == len(path) - 1

        for prev, curr in zip(path, path[1:]):
            assert manhattan_distance(prev.position, curr.position) == 1
            assert curr.direction.step(prev.position) == curr.position
            assert curr.run <= bounds.max_run
            if prev.direction is None or curr.direction == prev.direction:
                continue
            assert curr.direction is not prev.direction.reverse()
            assert prev.run >= bounds.min_run
            assert curr.run == 1

        print(f"  ({bounds.min_run}, {bounds.max_run}): {solution.step_count} steps, "
              f"cost {solution.cost}")

    print("  [PASS] Path reconstruction tests")


def test_boundaries():
    """Test single-cell grids and unreachable targets."""
    print("\n" + "="*60)
    print("TEST: Boundaries")
    print("="*60)

    single = CostGrid.from_rows([[7]])
    for bounds in (PART1, PART2, RunBounds(min_run=1, max_run=1)):
        solution = _solve(single, bounds)
        assert solution.found and solution.cost == 0
        assert solution.path == [MovementState.initial((0, 0))]

    # Too narrow to complete a run of 4
    for text in ("123", "123\n456\n789", "1\n2\n3\n4"):
        solution = _solve(_grid(text), PART2)
        print(f"  {text!r} with min_run=4: {solution.status.name}")
        assert solution.status is SolutionStatus.NO_PATH
        assert solution.cost is None
        assert solution.path == []
        try:
            solution.require_cost()
        except NoPathFound as e:
            assert isinstance(e, LookupError)
        else:
            raise AssertionError("require_cost should raise NoPathFound")

    # Exactly long enough: five cells in a row allow one run of 4
    solution = _solve(_grid("11111"), PART2)
    assert solution.cost == 4

    # Custom target
    grid = CostGrid.from_rows([[1, 2, 3], [4, 5, 6]]).with_target((0, 2))
    assert _solve(grid, PART1).require_cost() == 5

    # Start cell off the grid
    try:
        SolutionContext(grid=_grid("12\n34"), bounds=PART1, start=(-1, 0))
    except OutOfBounds as e:
        assert e.context["start"] == (-1, 0)
    else:
        raise AssertionError("start outside the grid should raise OutOfBounds")

    print("  [PASS] Boundary tests")


def test_matches_plain_dijkstra():
    """Without run limits the engine must match cell-level Dijkstra."""
    print("\n" + "="*60)
    print("TEST: Plain Dijkstra Equivalence")
    print("="*60)

    rng = random.Random(2023)
    for trial in range(25):
        rows, cols = rng.randint(1, 8), rng.randint(1, 8)
        grid = _random_grid(rng, rows, cols, low=0 if trial % 3 == 0 else 1)
        bounds = RunBounds(min_run=1, max_run=max(rows, cols))
        expected = _plain_dijkstra(grid)
        for strategy in get_strategy_names():
            assert _solve(grid, bounds, strategy).cost == expected

    print("  [PASS] Plain Dijkstra equivalence tests")


def test_properties():
    """Test admissibility bound, idempotence and strategy agreement."""
    print("\n" + "="*60)
    print("TEST: Properties")
    print("="*60)

    rng = random.Random(42)
    for _ in range(20):
        grid = _random_grid(rng, rng.randint(1, 9), rng.randint(1, 9))
        for bounds in (PART1, RunBounds(min_run=2, max_run=5), PART2):
            first = _solve(grid, bounds)
            second = _solve(grid, bounds)
            reference = _solve(grid, bounds, "dijkstra")

            assert first.status is second.status is reference.status
            assert first.cost == second.cost == reference.cost
            if first.found:
                lower_bound = manhattan_distance(grid.start, grid.target) * grid.min_cost
                assert first.cost >= lower_bound
                assert first.path_cost(grid) == first.cost

    print("  [PASS] Property tests")


def test_progress_and_defaults():
    """Test progress reporting and factory defaults."""
    print("\n" + "="*60)
    print("TEST: Progress / Factory")
    print("="*60)

    assert get_default_strategy_name() == "astar"
    assert {"astar", "dijkstra"} <= set(get_strategy_names())

    try:
        create_strategy("beam")
    except ValueError as e:
        print(f"  Unknown strategy rejected: {e}")
    else:
        raise AssertionError("unknown strategy should be rejected")

    reports = []
    rng = random.Random(5)
    grid = _random_grid(rng, 40, 40)
    context = SolutionContext(
        grid=grid,
        bounds=PART2,
        progress_callback=lambda expanded, message: reports.append(expanded),
    )
    solution = create_strategy("dijkstra").solve(context)
    print(f"  {solution.metrics.states_expanded} expanded, {len(reports)} progress reports")
    assert reports == sorted(reports)
    assert len(reports) == solution.metrics.states_expanded // 10_000
    assert context.elapsed_time() >= 0

    print("  [PASS] Progress / factory tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SOLVER VALIDATION TESTS")
    print("#"*60)

    tests = [
        ("CostGrid", test_cost_grid),
        ("Direction / MovementState", test_direction_and_state),
        ("RunBounds", test_run_bounds),
        ("Transitions", test_transitions),
        ("Heuristic", test_heuristic),
        ("Sample Grids", test_sample_grids),
        ("Path Reconstruction", test_path_reconstruction),
        ("Boundaries", test_boundaries),
        ("Plain Dijkstra", test_matches_plain_dijkstra),
        ("Properties", test_properties),
        ("Progress / Factory", test_progress_and_defaults),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
