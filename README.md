# wargproof

Verifiable data structures for package transparency:

- an append-only **log** built as a Merkle tree in binary in-order
  numbering, with inclusion and consistency proofs. Leaves are hashed as
  `H(0x00 || entry)` and branches as `H(0x01 || left || right)`;
- an immutable **map** backed by a sparse Merkle tree, where the bits of
  the hashed key are the path through the tree and every entry has an
  inclusion proof.

Proofs can be bundled together and moved to and from bytes in protocol
buffer wire form. The package has no dependencies outside the standard
library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Digests

`wargproof.digest.Hash` pairs digest bytes with the name of the `hashlib`
algorithm that made them (`sha256` by default). `Hash.of(value, algorithm)`
hashes the canonical bytes of a value as given by `visit_bytes`: `None` and
empty tuples give nothing, integers in 0..255 a single byte, strings their
UTF-8 bytes, byte strings themselves, hashes their digest, and tuples or
lists the concatenation of their items. `Hash.from_bytes` wraps raw digest
bytes and checks their length. `str(hash)` reads `sha256:<hex>`.

Every log, map and proof class takes an `algorithm` argument that defaults
to `sha256`.

## The log

`VecLog` (in `wargproof.log.vec_log`) keeps every node hash and can prove
inclusion and consistency. `StackLog` (in `wargproof.log.stack_log`) keeps
only the balanced roots and is enough for computing checkpoints. Both
implement `LogBuilder` from `wargproof.log.core`: `push(entry)` returns the
leaf `Node`, and `checkpoint()` returns a `Checkpoint` with `root` and
`length`.

```python
from wargproof.log.vec_log import VecLog
from wargproof.log.stack_log import StackLog

log = VecLog()
stack = StackLog()
for entry in ["93", "67", "30"]:
    log.push(entry)
    stack.push(entry)

assert log.checkpoint() == stack.checkpoint()

checkpoint = log.checkpoint()
proof = log.prove_inclusion(log.push("37"), 4)
root = proof.evaluate_value(log, "37")
assert root == log.checkpoint().root

old_root, new_root = log.prove_consistency(3, 4).evaluate(log)
assert old_root == checkpoint.root
assert new_root == log.checkpoint().root
```

`VecLog.root_at(length)` gives the root the log had at an earlier length,
or `None` for a length it never reached.

The proofs and their errors live in `wargproof.log.proof`:

- `InclusionProof.walk()` lists the nodes whose hashes are needed;
  `evaluate_value` and `evaluate_hash` return the root the proof leads to.
  A leaf that was not yet in the log at the given length raises
  `LeafTooNew`; a missing hash raises `InclusionHashNotKnown`. Both derive
  from `InclusionProofError`.
- `ConsistencyProof.inclusions()` gives one inclusion proof per balanced
  root of the old log; `evaluate` returns the old and the new root. An old
  length greater than the new one raises `PointsOutOfOrder`; other
  failures raise `ConsistencyHashNotKnown`, `InclusionFailed` (holding the
  inner error as `inner`) or `DivergingRoots`, all derived from
  `ConsistencyProofError`.

`LogProofBundle.bundle(consistency_proofs, inclusion_proofs, data)` (in
`wargproof.log.proof_bundle`) gathers proofs against one log length
together with exactly the hashes needed to check them, and raises
`ValueError` for proofs of different lengths, a missing hash, or no proofs
at all. `encode()` and `LogProofBundle.decode(data, algorithm)` move a
bundle to and from bytes, and `unbundle()` returns a `SparseLogData` with
the consistency and inclusion proofs, ready for evaluation on the
receiving side.

## The map

`Map` (in `wargproof.map.map`) is persistent: every `insert` or `extend`
returns a new map, and earlier maps are left untouched and share
structure with the new one. Two maps are equal when their roots are.

```python
from wargproof.map.map import Map

empty = Map()
first = empty.insert("foo", "bar")
second = first.extend([("baz", "bat"), ("foo", "qux")])

assert len(second) == 2
proof = second.prove("foo")
assert proof.evaluate("foo", "qux") == second.root()
assert second.prove("missing") is None
```

A `MapProof` holds the peers from the leaf up to the root and leaves out
the absent peers at the bottom, so `len(proof)` counts only the peers it
stores. `MapProofBundle` (in `wargproof.map.proof_bundle`) packs a list of
map proofs into bytes with `encode()` and reads them back with
`MapProofBundle.decode(data, algorithm)`.

The hashing rules are in `wargproof.map.hashes`: a leaf is
`H(0xff || H(key) || value)`, and a branch is hashed over a prefix of
`0b11`, `0b10`, `0b01` or `0b00` saying which children are present.

## Node arithmetic

`wargproof.log.node.Node` exposes the index arithmetic of the in-order
layout: `height`, `side`, `parent`, `sibling`, `left_sibling`,
`right_sibling`, `children`, `leftmost_descendent`,
`rightmost_descendent`, `exists_at_length`, `next_node_with_height`,
`Node.first_node_with_height` and `Node.broots_for_len`, which lists the
balanced roots of a log of a given length, tallest first.

## Wire format

`wargproof.protowire` encodes and decodes the bundle messages
(`LogProofBundleMessage`, `MapProofBundleMessage` and the messages inside
them) by hand. Malformed input raises `DecodeError`, a `ValueError`.

## The grep demo

A small filter that prints the lines of standard input containing a
pattern:

```
printf 'alpha\nbeta\ngamma\n' | wargproof-grep ta
```

Without a pattern it prints a usage line to standard error and exits with
status 1.

## What it does not do

This is a library of data structures and proofs. It does not talk to a
registry, publish or download packages, keep signing keys, or persist logs
and maps to disk; everything is held in memory. Apart from the grep demo
it has no command line.