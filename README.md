# absolution

A small turn-based strategy game that runs in your terminal. You steer your
civilisation by typing commands into a prompt. Each turn your resources grow,
and a mining campaign can raise your metal income for later turns.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

Start the game with:

```
absolution
```

The game takes over the whole terminal window. The screen has four panels:

- **Terminal**: messages from the game, with the newest at the top.
- **Resources**: the current turn, population (shown in thousands, with a
  `B` suffix), metals, mana and founds.
- **Campaign**: the running campaign's name, a progress gauge and its level.
  It stays empty until a campaign has been started.
- **Input**: the command prompt.

Type a command and press Enter. Backspace deletes the character before the
cursor, and the left and right arrow keys move the cursor. Other keys are
ignored.

### Commands

| Command                 | Effect                                                   |
|-------------------------|----------------------------------------------------------|
| `turn`                  | end the turn, collect resources and advance campaigns    |
| `help`                  | list the commands                                        |
| `start campaign mining` | start a mining campaign                                  |
| `exit`                  | leave the game                                           |

Commands are split on whitespace and must match exactly; anything else is
silently ignored.

Every turn each stockpile grows by its income: one metal, one mana, one
founds and one population to begin with. A running mining campaign gains
progress each turn according to your population and its level. On the turn
after its progress reaches 100, the campaign resets its progress, goes up one
level and your metal income per turn rises by 0.25.

## Using the game state from Python

The game state does not need the terminal, so you can drive it from code:

```python
from absolution.campaigns import CampaignKind
from absolution.game_data import GameData
from absolution.game_system import GameSystem

data = GameData()
system = GameSystem()
system.start_new(CampaignKind.MINING)

for _ in range(10):
    data.turn()
    system.update(data)

print(data.turns, data.resources.metals, system.campaign.progress)
```

Commands can be run without a terminal too, through a `Game` and its
`registry`:

```python
from absolution.game import Game

game = Game()
game.registry.dispatch("start campaign mining", game)
game.registry.dispatch("turn", game)
print(game.data.terminal.lines())
```

Key presses are applied with `absolution.input.handle_key(game, key)`, where
`key` is a string of characters to type or one of `Key.BACKSPACE`,
`Key.LEFT`, `Key.RIGHT` and `Key.ENTER`.

`absolution.ui.draw(data, system, width, height)` renders the whole screen as
a `Screen` holding plain text `lines` and the `cursor` position, which helps
with testing and debugging. The single panels are available from
`absolution.widgets`.

## What the game does not do

There is no saving or loading: a game lives only as long as the program runs.
Mining is the only kind of campaign, and there is a single campaign slot.