# %% [markdown]
# # aliasmatch: Quickstart
#
# **Is this the same release?** Catalogue metadata arrives from many sources,
# and the same title or artist is spelled a dozen ways:
#
# ```
# "Back and Forth"              vs  "Back & Forth"
# "Mozart: The Final Quartets"  vs  "The Final Quartets - Mozart"
# "Heize (헤이즈)"               vs  "Heize"
# ```
#
# aliasmatch scores such pairs. Its distinctive metric, `lcs-coverage`, keeps
# taking the longest common substring out of both strings until nothing of
# three or more characters is left, so reordered words still count.
#
# | Part | Topic |
# |------|-------|
# | 1 | Coverage by disjoint common substrings |
# | 2 | Named comparers and case folding |
# | 3 | Alias lists |
# | 4 | Polars |
# | 5 | Comparing metrics on the fixture corpus |

# %%
import polars as pl

import aliasmatch as am

# %% [markdown]
# ---
# ## Part 1: Coverage by disjoint common substrings

# %%
a = "Mozart: The Final Quartets"
b = "The Final Quartets - Mozart"

for match in am.SubstringCover(a, b).matches():
    print(f"{match.length:3d}  {a[match.a_start : match.a_start + match.length]!r}")

print(f"cover = {am.cover_length(a, b)}")
print(f"lcs-coverage = {am.lcs_coverage_similarity(a, b):.3f}")

# %% [markdown]
# Matches never overlap: once "abcd" is taken, "cdef" can only contribute
# "ef", which is shorter than three characters and is ignored.

# %%
print(am.cover_length("abcdef", "abcdXcdef"))  # 4
print(am.cover_length("abcdef", "abcdXcdef", min_length=2))  # 6

# %% [markdown]
# ---
# ## Part 2: Named comparers and case folding

# %%
for name, compare in am.DEFAULT_REGISTRY.items():
    print(f"{name:25} {compare('Back and Forth', 'Back & Forth'):.3f}")

# %% [markdown]
# Legacy names still resolve:

# %%
print(am.similarity("levenshein") is am.levenshtein_similarity)

# %% [markdown]
# `case_insensitive()` lowercases both sides. If the lowercased strings are
# equal but a metric still scores them below 1.0, the comparer returns -1.0
# so the metric can be flagged.

# %%
folded = am.DEFAULT_REGISTRY.case_insensitive()
print(folded["string-compare"]("MARR", "Marr"))  # 1.0

suspicious = am.wrap_case_insensitive(lambda a, b: 0.5)
print(suspicious("MARR", "marr"))  # -1.0

# %% [markdown]
# ---
# ## Part 3: Alias lists
#
# Artists carry several names. The list score is the best pair.

# %%
lcs = folded["lcs-coverage"]
print(am.list_similarity(["Paul McCartney", "Wings"], ["Paul McCartney & Wings"], lcs))
print(am.list_similarity([], ["Wings"], lcs))  # 0.0: nothing to compare

# %% [markdown]
# ---
# ## Part 4: Polars

# %%
releases = pl.DataFrame(
    {
        "ours": ["Back and Forth", "Corail (Remixed)", "Episode 1"],
        "theirs": ["Back & Forth", "Corail", "Episode 2"],
    }
)
releases = releases.with_columns(score=am.batch_similarity(releases["ours"], releases["theirs"]))
print(releases)

titles = pl.DataFrame({"title": ["Episode 1", "Episode 2", "Le Freak", "Le Freak (Remix)"]})
print(am.find_similar_pairs(titles, "title", min_similarity=0.5))

# %% [markdown]
# ---
# ## Part 5: Comparing metrics on the fixture corpus
#
# The same report is available as `aliasmatch-bench` on the command line.

# %%
from aliasmatch.harness import format_report, run_benchmark

for line in format_report(run_benchmark()):
    print(line)
