# grafuri

A small collection of tree and graph algorithms. Each module offers plain
library functions and a command-line tool that reads its data from a text
file and prints the results. There are no dependencies beyond the standard
library.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Trees

- `grafuri.child_sibling` – `ChildSiblingTree`, a general tree kept as a table
  of `ChildSiblingNode` rows (first child, right sibling, key). Nodes are
  addressed by 1-based references, 0 meaning "none"; keys and references are
  limited to 0..255 and the table holds at most 99 nodes. It offers `insert`,
  `root`, `node_key`, `first_child`, `right_sibling`, `find_index`,
  `pre_order`, `in_order`, `post_order` and `format_table`. `read_tree(path)`
  reads `key first_child right_sibling` triples.
- `grafuri.parent_tree` – `ParentTree`, a general tree kept as a table of
  `ParentNode` rows (parent, key), with the same traversals plus `parent`,
  `node` and `delete`. `delete(ref)` removes a node and its direct children
  and compacts the table; it raises `ValueError` and leaves the tree
  unchanged when the table cannot be compacted. `read_tree(path)` reads
  `key parent` pairs.
- `grafuri.bst` – a binary search tree of integers (`BinaryNode`, `insert`,
  `build_tree`); equal values are ignored. `pre_order`, `in_order` and
  `post_order` return lists, and `format_tree` gives the three traversals as
  text.
- `grafuri.binary_transform` – `transform(tree, ref)` turns a
  `ChildSiblingTree` into `BinaryTreeNode`s (left = first child, right = next
  sibling); `pre_order` lists its keys.

## Graphs (adjacency matrices)

- `grafuri.spanning` – `prim` and `kruskal` return the chosen `Edge`s of a
  minimum spanning tree (or forest); `most_connected` gives the first vertex
  with the highest degree; `fence_posts` counts posts for a fence with one
  post every 100 units; `read_graph` reads a vertex count and `a b cost`
  triples into a symmetric matrix (at most 30 vertices).
- `grafuri.shortest` – `dijkstra` returns distances from a start vertex
  (`UNREACHABLE`, 9999, where there is no path); `dijkstra_with_wait` adds a
  waiting time at every stop after the start and also returns predecessors,
  from which `path_to` rebuilds a route; `read_weighted` reads header values
  and `a b cost` triples, directed or not.
- `grafuri.complement` – `complement` flips every off-diagonal entry;
  `read_matrix` and `format_matrix` read and print an `n`-by-`n` matrix.
- `grafuri.paths` – `increasing_paths(n, start, end)` yields every path from
  `start` to `end` through increasing vertex numbers; it raises `ValueError`
  unless `0 <= start < end < n`.
- `grafuri.friends` – `Person`, `Network`, `read_network` and
  `suggest_friends(network, user, limit=3)`, which returns up to `limit`
  friends of the user's friends who are not yet the user's friends.

## Library use

    from grafuri.bst import build_tree, in_order

    root = build_tree([50, 30, 70, 20, 40])
    print(in_order(root))          # [20, 30, 40, 50, 70]

    from grafuri.spanning import kruskal

    matrix = [
        [0, 4, 1],
        [4, 0, 2],
        [1, 2, 0],
    ]
    for edge in kruskal(matrix):
        print(edge.u, edge.v, edge.cost)

## Commands

    grafuri-child-sibling FILE   # child/sibling tree table and traversals
    grafuri-parent-tree FILE     # parent-pointer tree table and traversals
    grafuri-bst FILE             # binary search tree traversals
    grafuri-transform FILE       # child/sibling tree turned into a binary tree
    grafuri-network [FILE]       # most connected computer, Prim and Kruskal edges
    grafuri-fence [FILE]         # fence segments and number of posts
    grafuri-complement [FILE]    # complement of a graph
    grafuri-factory [FILE]       # cheapest route from the first to the last factory
    grafuri-towns [FILE]         # routes between towns with a waiting time
    grafuri-paths [N START END]  # increasing paths; asks for missing values
    grafuri-friends [FILE] [--user INDEX]   # friend suggestions (user 1 by default)

Where `FILE` is optional it defaults to `input.txt` in the current
directory. The file formats:

- `grafuri-network`, `grafuri-fence`: vertex count, then `a b cost` triples
  (undirected).
- `grafuri-factory`: vertex count, then `a b cost` triples (directed).
- `grafuri-towns`: vertex count and waiting time, then `a b cost` triples
  (undirected).
- `grafuri-complement`: `n`, then the `n * n` matrix entries.
- `grafuri-friends`: number of people, one `name gender residence` line per
  person, then pairs of person indices.

Messages and labels in the output are in Romanian. Commands exit with status
1 when the input file cannot be read or is malformed.

## Limits

Trees and graphs live only in memory: nothing is saved, and there is no
interactive editing. `ParentTree.delete` removes only a node's direct
children, not deeper descendants.