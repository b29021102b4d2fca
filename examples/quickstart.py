# %% [markdown]
# # stralgo Quickstart
#
# Eight string metrics, each over bytes or Unicode codepoints.
#
# | Family | Functions | Result |
# |--------|-----------|--------|
# | Exact position | `hamming`, `lee` | int distance, equal lengths only |
# | Bigram overlap | `dice_coefficient`, `white_similarity` | float in [0, 1] |
# | Edit distance | `levenshtein`, `damerau_levenshtein` | int distance |
# | Alignment | `jaro_similarity`, `jaro_winkler_similarity` | float in [0, 1] |

# %%
import polars as pl

import stralgo as sa
from stralgo import batch, bytewise, codepoints

# %% [markdown]
# ---
# ## Part 1: Edit distances
#
# Levenshtein counts insertions, deletions and substitutions. Damerau-Levenshtein
# also counts swapping two adjacent characters as a single edit.

# %%
print(sa.levenshtein("kitten", "sitting"))  # 3
print(sa.levenshtein("martha", "marhta"))  # 2
print(sa.damerau_levenshtein("martha", "marhta"))  # 1

# %% [markdown]
# ## Part 2: Granularity
#
# The same call can count UTF-8 bytes instead of characters. "ö" is two bytes,
# so swapping it with "j" is no longer one adjacent transposition.

# %%
print(sa.damerau_levenshtein("Sjöstedt", "Söjstedt"))  # 1
print(sa.damerau_levenshtein("Sjöstedt", "Söjstedt", granularity="byte"))  # 2

# The granularity modules fix the choice up front
print(bytewise.hamming("日本語", "日本ゴ"))  # 3
print(codepoints.hamming("日本語", "日本ゴ"))  # 1

# %% [markdown]
# ## Part 3: Similarities

# %%
print(sa.dice_coefficient("night", "nacht"))  # 0.25
print(sa.white_similarity("Healed", "Sealed"))  # 0.8
print(round(sa.jaro_similarity("dwayne", "duane"), 4))  # 0.8222
print(round(sa.jaro_winkler_similarity("dwayne", "duane"), 4))  # 0.84

# Winkler parameters: prefix weight, maximum prefix, boost threshold
print(round(sa.jaro_winkler_similarity("dwayne", "duane", 0.2, 2, 0.5), 4))

# %% [markdown]
# ## Part 4: Undefined metrics raise

# %%
try:
    sa.hamming("green eggs", "ham")
except sa.LengthMismatchError as e:
    print(f"LengthMismatchError: {e}")

try:
    sa.white_similarity("a b", "c d")
except sa.InsufficientContentError as e:
    print(f"InsufficientContentError: {e}")

print(sa.lee("3140", "2543", 6))  # 6

# %% [markdown]
# ## Part 5: Lists and DataFrames

# %%
print(batch.pairwise(["kitten", "flaw"], ["sitting", "lawn"]))  # [3, 2]
print(batch.matrix(["hello"], ["hallo", "help"], "jaro_winkler"))

df = pl.DataFrame(
    {
        "name": ["martha", "dwayne", "kitten"],
        "other": ["marhta", "duane", "sitting"],
    }
)
print(
    df.with_columns(
        edits=pl.col("name").stralgo.levenshtein(pl.col("other")),
        score=pl.col("name").stralgo.jaro_winkler(pl.col("other")),
        vs_martha=pl.col("name").stralgo.metric("martha", "damerau_levenshtein"),
    )
)
