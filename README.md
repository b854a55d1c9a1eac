# chatplugins

Self-contained logic behind a set of group-chat bot features. Each module
handles the rules, storage and text of one feature. Sending and receiving
messages is left to your bot framework.

## Installation

```
pip install chatplugins
```

Install with `pip install chatplugins[test]` to run the test suite as well.

## Modules

- `chatplugins.score`: `ScoreDB(path)` keeps experience scores and sign-in
  records in SQLite. It offers `score_of`, `set_score`, `sign_in_of`,
  `set_sign_in(uid, count, now)`, `top_scores(n)` and `close`, and it also
  works as a context manager. `sign_in_of` returns a `SignIn`, whose
  `signed_today(now)` tells whether the daily sign-in was already used.
  `get_rank` turns experience into a level (-1 when out of range),
  `next_rank_score` gives the experience needed for the next level, and
  `hour_word` gives the greeting for the time of day.
- `chatplugins.sleep`: `SleepDB(path)` records good-night and good-morning
  times. `sleep(gid, uid, now)` and `get_up(gid, uid, now)` each return the
  caller's place among tonight's sleepers or this morning's risers, together
  with the time since the user's last record. `split_duration` breaks a
  `timedelta` into hours, minutes and seconds. `is_morning` (6 to 12 o'clock)
  and `is_evening` (21 to 3 o'clock) say when each command counts.
- `chatplugins.thesaurus`: matching for reply dictionaries. `Mode` selects a
  dictionary. `set_mode` and `set_probability` store the mode and the
  trigger probability in a chat's data word, and `set_probability` raises
  `ValueError` for digits outside 1..8. `can_match` decides whether to
  reply. `load_simai` reads the YAML word list. `match` finds the key a
  message triggers. `render_reply` fills in `{name}` and `{me}` and splits
  the reply at `{segment}`.
- `chatplugins.tarot`: `TarotDeck.from_json(cards_json, formations_json)`
  builds a deck of `Card`s and `Formation`s. `draw(kind, n, rng)` returns
  distinct `Draw`s, each upright or reversed. `lookup(name)` finds a card by
  name and `card_list_text()` lists the major arcana. `spread(kind,
  formation, rng)` lays out a named spread and raises `LookupError` for an
  unknown one. `parse_draw_count` reads the "n张" prefix of a draw request.
- `chatplugins.nativewife`: `WifeStore(base)` keeps one folder of pictures
  per group. It offers `names`, `add` and `remove`. `draw(gid, nickname,
  today)` picks the same picture for the same nickname on the same day and
  raises `LookupError` when the group has none. `extract_name` takes the
  name out of a command, and `can_add` checks who may add pictures.
- `chatplugins.reborn`: `Reborn(areas)` or `Reborn.from_json(text)` draws a
  weighted country and gender. `reborn(rng)` returns the announcement text.
- `chatplugins.nsfw`: `judge` and `auto_judge` turn a classifier
  `Prediction` into a verdict. `auto_judge` returns `None` when no remark is
  due.
- `chatplugins.runcode`: `cut_too_long` trims program output after 30 line
  breaks or 1000 characters.
- `chatplugins.quan`: `parse_quan(body, qq)` builds the account-weight reply
  and raises `ValueError` when the service body holds no weight.
- `chatplugins.nbnhhsh`: `parse_nbnhhsh` reads the meanings out of the
  abbreviation-guess response. `COMMAND` is the regular expression for the
  chat command.

## Example

```python
import random
from datetime import datetime

from chatplugins.score import ScoreDB, get_rank, hour_word
from chatplugins.tarot import TarotDeck

now = datetime.now()
with ScoreDB("score.db") as db:
    level = db.score_of(42) + 1
    db.set_score(42, level)
    db.set_sign_in(42, db.sign_in_of(42).count + 1, now)
    print(hour_word(now), "LEVEL:", get_rank(level))

cards = '{"0": {"name": "愚者", "info": {"description": "a", "reverseDescription": "b", "imgUrl": "0.png"}}}'
deck = TarotDeck.from_json(cards, "{}")
print(deck.lookup("愚者"))
```

## What this package does not do

- It sends and receives no chat messages and makes no network requests.
  `parse_quan` and `parse_nbnhhsh` only read response bodies that you have
  already fetched.
- It draws no pictures. Sign-in cards, rankings and rendered text are left
  to the caller.
- It does not include the group "marriage" game (daily pairing, favour
  scores, skill cooldowns). It also has no readers for fortune-slip or diary
  text databases.

## Running the tests

```
pytest
```