# directory combat.py
"""
Turn-based battle engine.

    state = InitializeBattle(encounter.monsters, player, encounter.can_run, encounter.ambush)
    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, seed)
    state, player = ProcessMonsterAction(state, player, seed)

Both processors mutate and return the state and player they are given.
Every call draws from a generator keyed by (seed, round, log length), so a
replayed battle with the same seed and actions plays out identically. Once
battle_result leaves "ongoing" the state is never changed again.
"""

import math
from typing import Optional, List

from monsters import Monster
from seeded_random import SeededRandom
from world_utils import LogWorldEvent

SPELLS = {
    "fireball": {"name": "Fireball", "mana": 5, "damage": 15},
    "lightning": {"name": "Lightning Bolt", "mana": 10, "damage": 25},
    "heal": {"name": "Heal", "mana": 8, "heal": 20},
}

MONSTER_CRIT_CHANCE = 0.05
DEFAULT_PLAYER_DEFENSE = 5
DEFAULT_PLAYER_SPEED = 10
CONFUSION_SELF_HIT_CHANCE = 1 / 3
POISON_TICK_FRACTION = 0.05


# -------------------------------------------------------------------
# Battle state
# -------------------------------------------------------------------

class PlayerStatus:
    """Status ailments on the player; each carries a turns-left counter."""

    AILMENTS = ("poison", "sleep", "paralysis", "confusion")

    def __init__(self):
        self.turns = {name: 0 for name in self.AILMENTS}

    @property
    def poisoned(self):
        return self.turns["poison"] > 0

    @property
    def sleeping(self):
        return self.turns["sleep"] > 0

    @property
    def paralyzed(self):
        return self.turns["paralysis"] > 0

    @property
    def confused(self):
        return self.turns["confusion"] > 0

    def apply(self, ailment, duration):
        self.turns[ailment] = max(self.turns[ailment], duration)

    def tick(self, ailment):
        """Count down one turn. Returns True when the ailment just wore off."""
        if self.turns[ailment] <= 0:
            return False
        self.turns[ailment] -= 1
        return self.turns[ailment] == 0

    def cure(self, ailment):
        if ailment == "all":
            for name in self.AILMENTS:
                self.turns[name] = 0
        elif ailment in self.turns:
            self.turns[ailment] = 0

    def to_dict(self):
        return {
            "poisoned": self.poisoned,
            "poison_turns_left": self.turns["poison"],
            "sleeping": self.sleeping,
            "sleep_turns_left": self.turns["sleep"],
            "paralyzed": self.paralyzed,
            "paralysis_turns_left": self.turns["paralysis"],
            "confused": self.confused,
            "confusion_turns_left": self.turns["confusion"],
        }


class TurnOrderEntry:
    def __init__(self, kind, id, name, speed, index=None):
        self.kind = kind          # "player" or "monster"
        self.id = id
        self.name = name
        self.speed = speed
        self.index = index        # position in BattleState.monsters

    def to_dict(self):
        return dict(self.__dict__)

    def __repr__(self):
        return f"<Turn {self.kind} {self.name} spd={self.speed}>"


class BattleAction:
    def __init__(self, type, target=None, spell=None, item=None):
        self.type = type
        self.target = target
        self.spell = spell
        self.item = item


class RewardItem:
    def __init__(self, item_id, quantity):
        self.item_id = item_id
        self.quantity = quantity

    def to_dict(self):
        return {"item_id": self.item_id, "quantity": self.quantity}


class BattleRewards:
    def __init__(self, experience=0, gold=0, items: Optional[List[RewardItem]] = None):
        self.experience = experience
        self.gold = gold
        self.items = items or []

    def to_dict(self):
        return {
            "experience": self.experience,
            "gold": self.gold,
            "items": [i.to_dict() for i in self.items],
        }

    def __repr__(self):
        return f"<Rewards xp={self.experience} gold={self.gold} items={len(self.items)}>"


class BattleState:
    def __init__(self, monsters, turn_order, can_run=True, player_turn=True):
        self.monsters = monsters
        self.turn_order = turn_order
        self.can_run = can_run
        self.player_turn = player_turn
        self.current_round = 1
        self.battle_log = []
        self.player_status = PlayerStatus()
        self.selected_target = 0
        self.battle_result = "ongoing"
        self.rewards = None

    @property
    def live_monsters(self):
        return [m for m in self.monsters if m.is_alive]

    @property
    def is_over(self):
        return self.battle_result != "ongoing"

    def log(self, message):
        self.battle_log.append(message)

    def to_dict(self):
        return {
            "monsters": [m.to_dict() for m in self.monsters],
            "turn_order": [t.to_dict() for t in self.turn_order],
            "can_run": self.can_run,
            "player_turn": self.player_turn,
            "current_round": self.current_round,
            "battle_log": list(self.battle_log),
            "player_status": self.player_status.to_dict(),
            "selected_target": self.selected_target,
            "battle_result": self.battle_result,
            "rewards": self.rewards.to_dict() if self.rewards else None,
        }

    def __repr__(self):
        return (f"<Battle round={self.current_round} result={self.battle_result} "
                f"monsters={len(self.live_monsters)}/{len(self.monsters)}>")


# -------------------------------------------------------------------
# Setup
# -------------------------------------------------------------------

def CalculateTurnOrder(player, monsters):
    """Player and live monsters, fastest first. Ties keep the player ahead."""
    entries = [TurnOrderEntry(
        "player", "player", player.name,
        player.stats.dexterity or DEFAULT_PLAYER_SPEED,
    )]
    for i, monster in enumerate(monsters):
        if monster.is_alive:
            entries.append(TurnOrderEntry("monster", monster.id, monster.name, monster.stats.speed, i))
    entries.sort(key=lambda e: e.speed, reverse=True)
    return entries


def InitializeBattle(monsters, player, can_run=True, ambush=False):
    """Monsters may be Monster objects or dicts; dicts get default stats and ids."""
    roster = [
        m if isinstance(m, Monster) else Monster.from_dict({"id": f"monster-{i}", **m})
        for i, m in enumerate(monsters)
    ]
    if not roster:
        raise ValueError("a battle needs at least one monster")

    state = BattleState(
        monsters=roster,
        turn_order=CalculateTurnOrder(player, roster),
        can_run=can_run,
        player_turn=not ambush,
    )
    if ambush:
        state.log("You've been ambushed! The enemies attack first!")
    else:
        state.log("Battle started! You have the initiative!")
    return state


# -------------------------------------------------------------------
# Shared rules
# -------------------------------------------------------------------

def _ActionRandom(seed, state, actor):
    return SeededRandom(f"{seed}-{actor}-{state.current_round}-{len(state.battle_log)}")


def PhysicalDamage(attack, defense, crit=False):
    defense = max(0, defense)
    reduction = defense / (defense + 50)
    return max(1, math.floor(attack * (1.5 if crit else 1.0) * (1 - reduction)))


def MagicDamage(power, magic_resist, crit=False):
    magic_resist = max(0, magic_resist)
    reduction = magic_resist / (magic_resist + 100)
    return max(1, math.floor(power * (1.5 if crit else 1.0) * (1 - reduction)))


def CalculateRunChance(player, monsters):
    live = [m for m in monsters if m.is_alive]
    avg_speed = sum(m.stats.speed or 5 for m in live) / len(live) if live else 0
    dexterity = player.stats.dexterity or DEFAULT_PLAYER_SPEED
    return min(0.9, max(0.1, 0.5 + (dexterity - avg_speed) * 0.05))


def _RefreshTurnOrder(state):
    state.turn_order = [
        e for e in state.turn_order
        if e.kind == "player" or state.monsters[e.index].is_alive
    ]
    if state.selected_target is not None and state.selected_target >= len(state.live_monsters):
        state.selected_target = 0 if state.live_monsters else None


def _CheckVictory(state, player, seed):
    if state.live_monsters:
        return
    state.battle_result = "victory"
    state.rewards = CalculateBattleRewards(state.monsters, player.level, f"{seed}-rewards")
    state.log("Victory! You've defeated all enemies!")
    LogWorldEvent("battle", f"{player.name} won in round {state.current_round}: {state.rewards.experience} xp, {state.rewards.gold} gold.")


def _Defeat(state, player):
    state.battle_result = "defeat"
    state.log("You have been defeated!")
    LogWorldEvent("battle", f"{player.name} was defeated in round {state.current_round}.")


def _ResolveTarget(state, target):
    live = state.live_monsters
    if target is None or not 0 <= target < len(live):
        return None
    return live[target]


# -------------------------------------------------------------------
# Player actions
# -------------------------------------------------------------------

def _Attack(action, state, player, rng, seed):
    monster = _ResolveTarget(state, action.target)
    if monster is None:
        state.log("Invalid target!")
        return

    crit = rng.next_bool(player.stats.dexterity / 100)
    damage = PhysicalDamage(player.stats.attack, monster.stats.defense, crit)
    monster.stats.hp = max(0, monster.stats.hp - damage)

    if crit:
        state.log(f"Critical hit! You deal {damage} damage to {monster.name}!")
    else:
        state.log(f"You attack {monster.name} for {damage} damage!")

    if not monster.is_alive:
        state.log(f"{monster.name} is defeated!")
        _CheckVictory(state, player, seed)


def _CastSpell(action, state, player, rng, seed):
    spell = SPELLS.get((action.spell or "").lower())
    if spell is None:
        state.log("You don't know that spell!")
        return

    stats = player.stats
    if stats.current_mana < spell["mana"]:
        state.log(f"Not enough mana to cast {spell['name']}!")
        return

    if "heal" in spell:
        stats.current_mana -= spell["mana"]
        healed = min(spell["heal"], stats.max_health - stats.current_health)
        stats.current_health += healed
        state.log(f"You cast {spell['name']} and recover {healed} HP!")
        return

    monster = _ResolveTarget(state, action.target)
    if monster is None:
        state.log("Invalid target!")
        return

    stats.current_mana -= spell["mana"]
    crit = rng.next_bool(stats.energy / 100)
    damage = MagicDamage(spell["damage"], monster.stats.magic_resist, crit)
    monster.stats.hp = max(0, monster.stats.hp - damage)

    if crit:
        state.log(f"Critical! Your {spell['name']} hits {monster.name} for {damage} damage!")
    else:
        state.log(f"You cast {spell['name']} on {monster.name} for {damage} damage!")

    if not monster.is_alive:
        state.log(f"{monster.name} is defeated!")
        _CheckVictory(state, player, seed)


def _UseItem(action, state, player, rng, seed):
    item = action.item
    if item is None:
        state.log("Item usage failed.")
        return
    if item.consumable is None:
        state.log(f"{item.name} cannot be used in battle.")
        return

    held = player.find_item(item.id)
    if held is None or held.quantity <= 0:
        state.log(f"You don't have any {item.name} left!")
        return

    effect = held.consumable or item.consumable
    stats = player.stats

    if effect.health > 0:
        healed = min(effect.health, stats.max_health - stats.current_health)
        stats.current_health += healed
        state.log(f"You used {held.name} and recovered {healed} HP!")

    if effect.mana > 0:
        restored = min(effect.mana, stats.max_mana - stats.current_mana)
        stats.current_mana += restored
        state.log(f"You used {held.name} and recovered {restored} MP!")

    if effect.status_cure:
        state.player_status.cure(effect.status_cure)
        state.log(f"You used {held.name} and cured your status ailments!")

    player.consume_item(held.id)


def _Run(action, state, player, rng, seed):
    if not state.can_run:
        state.log("You cannot escape from this battle!")
        return

    if rng.next() < CalculateRunChance(player, state.monsters):
        state.battle_result = "escape"
        state.log("You successfully escaped from battle!")
        LogWorldEvent("battle", f"{player.name} escaped in round {state.current_round}.")
    else:
        state.log("You failed to escape!")


ACTION_HANDLERS = {
    "attack": _Attack,
    "spell": _CastSpell,
    "item": _UseItem,
    "run": _Run,
}


def _ForfeitForAilment(state):
    """Sleep or paralysis costs the player the turn. Returns True if it did."""
    status = state.player_status
    if status.sleeping:
        state.log("You are fast asleep and cannot act!")
        if status.tick("sleep"):
            state.log("You wake up!")
        return True
    if status.paralyzed:
        state.log("You are paralyzed and cannot move!")
        if status.tick("paralysis"):
            state.log("You can move again!")
        return True
    return False


def _ConfusedSelfHit(action, state, player, rng):
    """Confusion wears down by one each action and may turn an attack on yourself."""
    status = state.player_status
    if not status.confused:
        return False

    hit_self = action.type in ("attack", "spell") and rng.next_bool(CONFUSION_SELF_HIT_CHANCE)
    if hit_self:
        damage = PhysicalDamage(player.stats.attack * 0.5, player.stats.defense)
        player.stats.current_health = max(0, player.stats.current_health - damage)
        state.log(f"You are confused and hurt yourself for {damage} damage!")
    if status.tick("confusion"):
        state.log("You are no longer confused.")
    return hit_self


def ProcessPlayerAction(action, state, player, seed):
    if state.is_over or not state.player_turn:
        return state, player

    rng = _ActionRandom(seed, state, "player")

    if _ForfeitForAilment(state):
        pass
    elif _ConfusedSelfHit(action, state, player, rng):
        if player.stats.current_health <= 0:
            _Defeat(state, player)
    else:
        handler = ACTION_HANDLERS.get(action.type)
        if handler is None:
            state.log("Invalid action.")
        else:
            handler(action, state, player, rng, seed)

    if not state.is_over:
        state.player_turn = False

    _RefreshTurnOrder(state)
    return state, player


# -------------------------------------------------------------------
# Monster phase
# -------------------------------------------------------------------

def ChooseAbility(monster, rng):
    """First ability by default; with several, roll each use_chance and pick among the hits."""
    ability = monster.abilities[0]
    if len(monster.abilities) > 1:
        available = [a for a in monster.abilities if rng.next_bool(a.use_chance)]
        if available:
            ability = rng.pick(available)
    return ability


def _TryInflict(state, monster, ability, rng):
    effect = ability.status_effect
    if effect is None or not rng.next_bool(effect.chance):
        return
    state.player_status.apply(effect.type, effect.duration)
    state.log(f"{monster.name}'s {ability.name} inflicts {effect.type}!")


def _MonsterAct(state, player, monster, ability, rng):
    if ability.kind == "heal":
        healed = min(ability.heal_amount, monster.stats.max_hp - monster.stats.hp)
        monster.stats.hp += healed
        state.log(f"{monster.name} uses {ability.name} and recovers {healed} HP!")
        return

    if ability.kind == "status":
        state.log(f"{monster.name} uses {ability.name}!")
        _TryInflict(state, monster, ability, rng)
        return

    base = ability.damage or monster.stats.attack or 5
    crit = rng.next_bool(MONSTER_CRIT_CHANCE)
    defense = player.stats.defense or DEFAULT_PLAYER_DEFENSE
    damage = PhysicalDamage(base, defense, crit)
    player.stats.current_health = max(0, player.stats.current_health - damage)

    if crit:
        state.log(f"Critical hit! {monster.name} uses {ability.name} for {damage} damage!")
    else:
        state.log(f"{monster.name} uses {ability.name} for {damage} damage!")

    if player.stats.current_health > 0:
        _TryInflict(state, monster, ability, rng)


def _PoisonTick(state, player):
    if not state.player_status.poisoned:
        return
    damage = max(1, math.floor(player.stats.max_health * POISON_TICK_FRACTION))
    player.stats.current_health = max(0, player.stats.current_health - damage)
    state.log(f"You take {damage} poison damage!")
    if state.player_status.tick("poison"):
        state.log("The poison wears off.")
    if player.stats.current_health <= 0:
        _Defeat(state, player)


def ProcessMonsterAction(state, player, seed):
    if not state.monsters:
        raise ValueError("battle has no monsters")
    if state.is_over or state.player_turn:
        return state, player

    rng = _ActionRandom(seed, state, "monsters")

    for monster in state.live_monsters:
        _MonsterAct(state, player, monster, ChooseAbility(monster, rng), rng)
        if player.stats.current_health <= 0:
            _Defeat(state, player)
            break

    if not state.is_over:
        _PoisonTick(state, player)

    if not state.is_over:
        state.player_turn = True
        state.current_round += 1
        state.log(f"Round {state.current_round} begins!")

    _RefreshTurnOrder(state)
    return state, player


# -------------------------------------------------------------------
# Rewards
# -------------------------------------------------------------------

def _LevelMultiplier(level_diff):
    if level_diff >= 3:
        return 1.5
    if level_diff >= 1:
        return 1.2
    if level_diff <= -3:
        return 0.5
    if level_diff <= -1:
        return 0.8
    return 1.0


def CalculateBattleRewards(monsters, player_level, seed):
    rng = SeededRandom(seed)
    rewards = BattleRewards()

    for monster in monsters:
        if not isinstance(monster, Monster):
            monster = Monster.from_dict(monster)
        rewards.experience += math.floor(monster.level * 10 * _LevelMultiplier(monster.level - player_level))
        rewards.gold += math.floor(monster.level * 5 * (1 + rng.next_float(-0.2, 0.2)))

        for drop in monster.drops:
            if rng.next_bool(drop.chance):
                rewards.items.append(RewardItem(
                    drop.item_id,
                    rng.next_int(drop.min_quantity, drop.max_quantity),
                ))

    return rewards


def ApplyBattleRewards(player, rewards, item_factory=None):
    """
    Credit rewards to the player. item_factory(item_id, quantity) builds
    inventory items for drops; drops it returns None for are skipped.
    """
    player.experience += rewards.experience
    player.currency += rewards.gold
    if item_factory is None:
        return player
    for reward in rewards.items:
        item = item_factory(reward.item_id, reward.quantity)
        if item is not None:
            player.add_item(item)
    return player
