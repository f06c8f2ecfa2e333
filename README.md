# dsbasics

Small, readable implementations of classic data structures, plus a tiny
terminal contact book. No third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Data structures

- `dsbasics.dynamic_array.DynamicArray(capacity=10)`: a growable array with
  explicit capacity bookkeeping. A capacity of zero or less falls back to 10.
  It grows by half its capacity when it runs low and shrinks by half when it
  is mostly empty; `capacity()` reports the current value. It supports
  `len()`, iteration, indexing, `append`, `insert(pos, value)`,
  `pop(pos=None)` (the last element by default) and
  `remove(value, compare=None)`, which removes every matching element and
  returns how many were removed. Out-of-range positions raise `IndexError`.
- `dsbasics.stack.ArrayStack`: a LIFO stack built on `DynamicArray`, with
  `push`, `pop`, `top`, `is_empty` and `len()`. `pop` and `top` raise
  `IndexError` on an empty stack.
- `dsbasics.linked_list.DoubleLinkList`: a doubly linked list with
  `insert(pos, value)`, `prepend`, `append`, `delete_at(pos)`, `pop_front`,
  `pop_back`, `get(pos)`, `first`, `last`, `remove(value, compare=None)`,
  forward iteration and `reversed()`. Bad positions raise `IndexError`.
- `dsbasics.linked_queue.LinkedQueue`: a FIFO queue built on
  `DoubleLinkList`, with `push`, `pop`, `front`, `rear`, `is_empty` and
  `len()`. `pop`, `front` and `rear` raise `IndexError` on an empty queue.
- `dsbasics.bst.BinarySearchTree(compare=None)`: an unbalanced binary search
  tree of distinct values, ordered by a three-way comparison function (natural
  ordering if none is given). `insert` returns `False` for a value already
  present, `delete` returns `False` for a value that is absent. It supports
  `in`, `len()`, iteration in ascending order, `preorder()`, `inorder()`,
  `postorder()`, `level_order()` (all generators) and `height()`.

```python
from dsbasics.bst import BinarySearchTree

tree = BinarySearchTree(lambda a, b: a - b)
for n in (17, 6, 23, 48, 5, 11):
    tree.insert(n)

len(tree)                 # 6
tree.height()             # 3
list(tree.level_order())  # [17, 6, 23, 5, 11, 48]
list(tree.inorder())      # [5, 6, 11, 17, 23, 48]
```

```python
from dsbasics.linked_queue import LinkedQueue

queue = LinkedQueue()
for n in (11, 22, 33, 44, 55):
    queue.push(n)
while not queue.is_empty():
    print(queue.front())
    queue.pop()
```

Comparison functions take two values and return a negative number, zero or a
positive number, in the manner of `a - b`. Where `compare` is optional and
omitted, `==` decides which elements match.

## Contact book

The interactive contact menu runs in a terminal:

```
dsbasics-contact
dsbasics-contact --file path/to/contacts.txt
```

Press `A` to move the highlight up, `S` to move it down and `D` to open the
selected entry (keys are case-insensitive, and the selection wraps around).
Choosing "New contact" asks for a username and a password; the password is
not echoed when reading from a terminal. Usernames must be 3 to 15 characters
long and must not contain `!`, `@` or `$`. Each new contact is appended as a
`name<TAB>password` line to `contact.txt` in the current directory, or to the
file given with `--file`. Choosing "Quit", or reaching the end of input, ends
the program.

The same pieces are available from Python in `dsbasics.contact`:
`render_menu(highlight)`, `check_username(name)` (raises `InvalidUsername`),
`move_selection(current, key)`, `add_person(name, password, path)`, and the
`MenuOption` and `Key` enumerations.

### What the contact book does not do

- "Delete contact", "Find contact" and "Edit contact" appear in the menu but
  do nothing when chosen.
- Contacts are only ever appended to the file; they are never read back,
  listed or checked for duplicates.
- Passwords are not validated and are stored in plain text.