# %% [markdown]
# # fuzzbunny: Typeahead in a Page
#
# **What the user typed so far, against everything they might mean.**
#
# ---
#
# ## The Problem
#
# A search box filters a list on every keystroke. Users type initials
# ("fb" for "FuzzBunny"), fragments ("mimi" for "mimicry") and expect the
# matching letters to be highlighted:
#
# ```
# "usam"  ->  the [u]nited [s]tates of [am]erica
# "fb"    ->  [F]uzz[B]unny
# ```
#
# ---
#
# | Part | Topic |
# |------|-------|
# | 1 | Matching one string |
# | 2 | Filtering and ranking a list |
# | 3 | Quoted queries |
# | 4 | Reusing an index across keystrokes |
# | 5 | Polars |

# %%
import time

import polars as pl

import fuzzbunny as fb


def render(highlights):
    """Render highlight segments with matched parts in brackets."""
    return "".join(f"[{s}]" if i % 2 else s for i, s in enumerate(highlights))


# %% [markdown]
# ---
# ## Part 1: Matching one string

# %%
for text, query in [
    ("the united states of america", "usam"),
    ("FuzzBunny", "fb"),
    ("fuzzBunnyIsAwesome", "bia"),
    ("abcdefg", "dEf"),
    ("abcdefg", "abc xxx"),
]:
    result = fb.match_one(text, query)
    shown = render(result.highlights) if result else "(no match)"
    print(f"{query!r:>12} -> {shown}")

# %% [markdown]
# ---
# ## Part 2: Filtering and ranking a list
#
# Substring matches at the start of the string rank highest, then matches
# at the start of a word, then anything else. Ties are listed alphabetically.

# %%
heroes = [
    "Claire Bennet, Rapid cellular regeneration",
    "Matt Parkman, Telepathy",
    "Angela Petrelli, Enhanced dreaming",
    "Nathan Petrelli, Flight",
    "Peterr Petrelli, Empathic mimicry then tactile power mimicry",
    "Arthur Petrelli, Ability absorption",
    "Micah Sanders, Technopathy",
    "Samuel Sullivan, Terrakinesis",
    "Gabriel Gray / Sylar, Power mimicry and amplification",
]

for query in ["te", "mimi", "petrelli", "gs"]:
    print(f"\n{query!r}:")
    for result in fb.filter_and_rank(heroes, query):
        print(f"  {result.score:>6}  {render(result.highlights)}")

# %% [markdown]
# ---
# ## Part 3: Quoted queries
#
# A leading `"` asks for literal substring matching only. The closing quote
# is optional so matching works while the user is still typing.

# %%
for query in ["LA", '"LA', '"las v']:
    print(f"\n{query!r}:")
    for result in fb.filter_and_rank(["Los Angeles", "Las Vegas"], query):
        print(f"  {render(result.highlights)}")

# %% [markdown]
# ---
# ## Part 4: Reusing an index across keystrokes
#
# Boundaries (word, case and punctuation starts) are computed once per item
# and reused for every query.

# %%
catalogue = [f"{n} {title}" for n, title in enumerate(heroes * 2_000)]
index = fb.FuzzyIndex(catalogue)

for prefix in ["p", "pe", "pet", "petr", "petre"]:
    started = time.perf_counter()
    results = index.search(prefix, limit=3)
    elapsed = (time.perf_counter() - started) * 1000
    print(f"{prefix!r:>8}: {len(index)} items in {elapsed:.1f}ms, best: {results[0].text!r}")

# %% [markdown]
# ---
# ## Part 5: Polars

# %%
df = pl.DataFrame({
    "name": ["Hiro Nakamura", "Matt Parkman", "Micah Sanders", "Claire Bennet"],
    "power": ["Space-time manipulation", "Telepathy", "Technopathy", "Regeneration"],
})

print(fb.filter_dataframe(df, "power", "te"))
print(df.with_columns(score=pl.col("name").fuzzbunny.score("hn")))
