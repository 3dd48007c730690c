# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Emit a discriminating string dispatch as Python source lines.

Given (string, statement) pairs, the emitted code executes the statement of
the string equal to the subject and falls through for anything else. It
branches on the subject length first, then, within each length group, on the
character at the first position where the remaining candidates differ. Runs
shared by every candidate are compared as one slice. Each character of the
subject is inspected at most once along any path.

Example for `cos`, `sin`, `sqrt` (subject `name`, length in `length`):

	if length == 3:
		if name[0] == 'c':
			if name[1:] == 'os':
				return (1, 2)
		elif name[0] == 's':
			if name[1:] == 'in':
				return (3, 1)
	elif length == 4:
		if name[0:] == 'sqrt':
			return (4, 1)
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

StringPair = Tuple[str, str]


def emit_string_matcher(subject: str, length_var: str, matches: Sequence[StringPair], indent: str) -> List[str]:
	"""
	Return source lines dispatching on `subject`.

	`length_var` must already hold `len(subject)` in the emitted code. Matched
	statements are expected to leave the enclosing function (e.g. `return`);
	unmatched subjects run past the emitted lines.
	"""
	seen: set[str] = set()
	by_len: Dict[int, List[StringPair]] = {}
	for text, stmt in matches:
		if text in seen:
			raise ValueError(f"duplicate string '{text}' in matcher")
		seen.add(text)
		by_len.setdefault(len(text), []).append((text, stmt))

	lines: List[str] = []
	for i, length in enumerate(sorted(by_len)):
		kw = "if" if i == 0 else "elif"
		lines.append(f"{indent}{kw} {length_var} == {length}:")
		group = sorted(by_len[length])
		_emit_group(subject, group, 0, indent + "\t", lines)
	return lines


def _emit_group(subject: str, group: List[StringPair], char_no: int, indent: str, lines: List[str]) -> None:
	first = group[0][0]
	if len(group) == 1:
		rest = first[char_no:]
		if rest:
			lines.append(f"{indent}if {subject}[{char_no}:] == {rest!r}:")
			lines.append(f"{indent}\t{group[0][1]}")
		else:
			lines.append(f"{indent}{group[0][1]}")
		return

	# Candidates are distinct and equally long, so some position differs.
	pos = char_no
	while all(text[pos] == first[pos] for text, _ in group):
		pos += 1
	if pos > char_no:
		lines.append(f"{indent}if {subject}[{char_no}:{pos}] == {first[char_no:pos]!r}:")
		indent += "\t"

	buckets: Dict[str, List[StringPair]] = {}
	for pair in group:
		buckets.setdefault(pair[0][pos], []).append(pair)
	for i, ch in enumerate(sorted(buckets)):
		kw = "if" if i == 0 else "elif"
		lines.append(f"{indent}{kw} {subject}[{pos}] == {ch!r}:")
		_emit_group(subject, buckets[ch], pos + 1, indent + "\t", lines)


__all__ = ["StringPair", "emit_string_matcher"]
