# algobox

A small library of classic algorithms and data structures, together with a
handful of terminal games. It is meant for learning and experimenting: each
piece is short, self-contained and tested. It needs nothing beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Contents                                                                |
|----------------------|-------------------------------------------------------------------------|
| `algobox.searching`  | `binary_search`, `binary_search_recursive`, `first_last_occurrence`, `floor_index`, `h_index`, `h_index_brute`, `integer_sqrt` |
| `algobox.sorting`    | `merge_sort`, `quick_sort`, Lomuto `partition`                          |
| `algobox.numbers`    | `factorial`, `is_prime`, `reverse_number`, `digit_sum`, `add_without_plus`, `is_palindrome_number`, `nth_ugly_number`, `plus_one`, `super_pow`, `climb_stairs`, `swap_arithmetic`, `calculate` |
| `algobox.strings`    | `are_anagrams`, `reverse_words`, `reverse_chars`                        |
| `algobox.graphs`     | `Graph` with `bridges()`, `dijkstra`, `format_distances`, `bfs_order`, `maximal_network_rank`, `can_reach` |
| `algobox.arrays`     | `max_profit`, `median_sorted_arrays`                                    |
| `algobox.sudoku`     | `solve_sudoku`, `is_safe`, `parse_grid`, `format_board`                 |
| `algobox.avl_tree`   | self-balancing `AVLTree`                                                |
| `algobox.linked`     | `CircularLinkedList`, `DoublyLinkedList`, `LinkedStack`, `BoundedStack`, `StackError`, `ListNode`, `merge_two_lists`, `merge_k_lists` |
| `algobox.treap`      | `ImplicitTreap` with range add, assign, reverse and sum                 |
| `algobox.tictactoe`  | `UltimateTicTacToe`, `IllegalMove`, `check_win`, `is_board_full`       |
| `algobox.match3`     | `Match3Board`, a small match-three board                                |
| `algobox.guessing`   | `judge_guess` and the `Verdict` enum                                    |
| `algobox.wordle`     | `WordleGame`, `evaluate_guess`, `LetterState`, `Stats`                  |

## Using the library

```python
from algobox.searching import binary_search
from algobox.numbers import is_prime
from algobox.strings import are_anagrams, reverse_words
from algobox.graphs import can_reach, maximal_network_rank
from algobox.avl_tree import AVLTree
from algobox.treap import ImplicitTreap

binary_search([2, 3, 4, 10, 40], 10)       # 3
binary_search([2, 3, 4, 10, 40], 5)        # None
is_prime(7)                                # True
are_anagrams("listen", "silent")           # True
reverse_words("hello  big world")          # "world big hello"
maximal_network_rank(4, [[0, 1], [0, 3], [1, 2], [1, 3]])   # 4
can_reach([4, 2, 3, 0, 3, 1, 2], 5)        # True

tree = AVLTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
tree.search(40)                            # True
tree.inorder()                             # [20, 30, 40, 50, 70]

seq = ImplicitTreap([1, 2, 3, 4, 5])
seq.insert(2, [10, 20])
seq.to_list()                              # [1, 2, 10, 20, 3, 4, 5]
```

Searches return `None` when nothing is found. Sorting functions return new
lists and leave their input alone. Errors are raised as exceptions: popping an
empty stack or pushing onto a full `BoundedStack` raises `StackError`, an
illegal tic-tac-toe move raises `IllegalMove`, and a rejected Wordle guess
raises `ValueError` with the reason.

## Commands

Each interactive program is installed as a command. All of them read from
standard input and write plain text to standard output.

| Command              | What it does                                                   |
|----------------------|----------------------------------------------------------------|
| `algobox-search`     | reads a count, that many sorted integers and a target; reports where the target was found, iteratively and recursively |
| `algobox-sort`       | reads a count and that many integers; prints them before and after sorting (`--algorithm merge` or `quick`, default `merge`) |
| `algobox-sudoku`     | reads 81 numbers (0 for empty cells) and prints the solved grid, or "No solution exists" |
| `algobox-stack`      | a menu-driven fixed-size stack: push, pop, peek, display, exit |
| `algobox-tictactoe`  | two players on one terminal play Ultimate Tic-Tac-Toe          |
| `algobox-match3`     | swap cells on a coloured board to make rows of three (`--seed`) |
| `algobox-guess`      | guess a number between 1 and 100 (`--seed`)                    |
| `algobox-wordle`     | guess the five-letter word in six attempts, in hard mode (`--seed`, `--stats`) |

For example, to solve a puzzle stored in a file:

```
algobox-sudoku < puzzle.txt
```

`algobox-wordle` keeps its statistics (games played, won, current and best
streak) in `stats.txt` in the current directory unless `--stats` names
another file.

## What it does not do

The games are line-based terminal programs: there is no graphical screen and
no computer opponent. Wordle draws from a fixed list of fifteen words and
accepts only guesses from that list.