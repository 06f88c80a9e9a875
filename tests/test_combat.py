# tests/test_combat.py
import pytest

from combat import (
    BattleAction, BattleState, RewardItem, BattleRewards,
    InitializeBattle, ProcessPlayerAction, ProcessMonsterAction,
    PhysicalDamage, MagicDamage, CalculateRunChance, CalculateTurnOrder,
    CalculateBattleRewards, ApplyBattleRewards,
)
from item_catalog import CreateStarterItem
from monsters import Monster, MonsterStats, MonsterAbility, StatusEffect, GenerateMonster
from player import Item, ConsumableEffect
from seeded_random import SeededRandom

SEED = "battle-seed"


def _monster(name="Rat", hp=30, attack=5, speed=5, level=1, abilities=None):
    return Monster(id=f"m-{name}", name=name, level=level,
                   stats=MonsterStats(hp=hp, attack=attack, speed=speed),
                   abilities=abilities)


@pytest.fixture
def pin_random(monkeypatch):
    def pin(value):
        monkeypatch.setattr(SeededRandom, "next", lambda self: value)
    return pin


# --- Setup -----------------------------------------------------------

def test_battle_needs_monsters(player):
    with pytest.raises(ValueError):
        InitializeBattle([], player)


def test_initiative_and_ambush(player):
    state = InitializeBattle([_monster()], player)
    assert state.player_turn
    assert state.battle_log == ["Battle started! You have the initiative!"]
    assert state.battle_result == "ongoing"
    assert state.current_round == 1

    ambushed = InitializeBattle([_monster()], player, ambush=True)
    assert not ambushed.player_turn
    assert ambushed.battle_log == ["You've been ambushed! The enemies attack first!"]


def test_monster_dicts_get_defaults(player):
    state = InitializeBattle([{"name": "Slime"}], player)
    slime = state.monsters[0]
    assert isinstance(slime, Monster)
    assert slime.stats.hp == 10 and slime.stats.attack == 5
    assert slime.abilities[0].name == "Attack"


def test_dead_dict_monster_leaves_turn_order(player, pin_random):
    pin_random(0.5)
    state = InitializeBattle([{"name": "Slime", "stats": {"hp": 1}}, {"name": "Bat", "stats": {"hp": 30}}], player)
    assert [m.id for m in state.monsters] == ["monster-0", "monster-1"]

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert [m.is_alive for m in state.monsters] == [False, True]
    assert [e.name for e in state.turn_order] == ["Tester", "Bat"]


def test_turn_order_fastest_first(player):
    order = CalculateTurnOrder(player, [_monster("Slow", speed=3), _monster("Fast", speed=12), _monster("Even", speed=10)])
    assert [e.name for e in order] == ["Fast", "Tester", "Even", "Slow"]


# --- Formulas --------------------------------------------------------

def test_damage_floor_is_one():
    assert PhysicalDamage(0, 1000) == 1
    assert MagicDamage(0, 1000) == 1


def test_damage_formulas():
    assert PhysicalDamage(10, 5) == 9
    assert PhysicalDamage(10, 5, crit=True) == 13
    assert MagicDamage(15, 0) == 15
    assert MagicDamage(15, 0, crit=True) == 22
    assert MagicDamage(25, 100) == 12


def test_run_chance_clamped(player):
    player.stats.dexterity = 20
    assert CalculateRunChance(player, [_monster(speed=10)]) == 0.9
    player.stats.dexterity = 10
    assert CalculateRunChance(player, [_monster(speed=30)]) == 0.1
    assert CalculateRunChance(player, [_monster(speed=10)]) == 0.5


# --- Player actions --------------------------------------------------

def test_attack_to_victory_sets_rewards_once(player):
    state = InitializeBattle([_monster(hp=1)], player)

    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert state.battle_result == "victory"
    assert "Rat is defeated!" in state.battle_log
    assert state.battle_log[-1] == "Victory! You've defeated all enemies!"
    assert state.rewards.experience == 10
    rewards = state.rewards
    log_length = len(state.battle_log)

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    ProcessMonsterAction(state, player, SEED)
    assert state.rewards is rewards
    assert len(state.battle_log) == log_length
    assert state.battle_result == "victory"


def test_sequential_kills_to_victory(player, pin_random):
    pin_random(0.5)
    state = InitializeBattle([_monster("Rat", hp=9), _monster("Bat", hp=9), _monster("Imp", hp=9)], player)

    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    assert [e.name for e in state.turn_order] == ["Tester", "Bat", "Imp"]
    state, player = ProcessMonsterAction(state, player, SEED)
    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    state, player = ProcessMonsterAction(state, player, SEED)
    assert state.battle_result == "ongoing"
    assert state.current_round == 3

    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert state.battle_result == "victory"
    assert all(m.stats.hp == 0 for m in state.monsters)
    assert [e.kind for e in state.turn_order] == ["player"]
    assert player.stats.current_health == 100 - 4 * 3
    assert state.battle_log.count("Victory! You've defeated all enemies!") == 1
    rewards = state.rewards
    assert rewards is not None

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    ProcessMonsterAction(state, player, SEED)
    assert state.rewards is rewards


def test_attack_hands_turn_to_monsters(player, pin_random):
    pin_random(0.5)
    state = InitializeBattle([_monster(hp=30)], player)

    state, player = ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert state.monsters[0].stats.hp == 30 - PhysicalDamage(10, 3)
    assert state.battle_log[-1] == "You attack Rat for 9 damage!"
    assert not state.player_turn


def test_invalid_target(player):
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("attack", target=4), state, player, SEED)
    assert state.battle_log[-1] == "Invalid target!"


def test_unknown_action(player):
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("dance"), state, player, SEED)
    assert state.battle_log[-1] == "Invalid action."
    assert not state.player_turn


def test_not_players_turn_is_ignored(player):
    state = InitializeBattle([_monster()], player, ambush=True)
    before = state.to_dict()
    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    assert state.to_dict() == before


def test_fireball_spends_mana(player, pin_random):
    pin_random(0.5)
    state = InitializeBattle([_monster(hp=40)], player)
    ProcessPlayerAction(BattleAction("spell", target=0, spell="fireball"), state, player, SEED)
    assert player.stats.current_mana == 45
    assert state.monsters[0].stats.hp == 25
    assert state.battle_log[-1] == "You cast Fireball on Rat for 15 damage!"


def test_spell_needs_mana(player):
    player.stats.current_mana = 2
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("spell", target=0, spell="lightning"), state, player, SEED)
    assert state.battle_log[-1] == "Not enough mana to cast Lightning Bolt!"
    assert player.stats.current_mana == 2
    assert state.monsters[0].stats.hp == 30


def test_heal_spell_clamps(player):
    player.stats.current_health = 90
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("spell", spell="heal"), state, player, SEED)
    assert player.stats.current_health == 100
    assert player.stats.current_mana == 42


def test_unknown_spell(player):
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("spell", target=0, spell="meteor"), state, player, SEED)
    assert state.battle_log[-1] == "You don't know that spell!"


def test_potion_decrements_inventory(player):
    player.stats.current_health = 10
    player.add_item(CreateStarterItem("potion_minor", 2))
    state = InitializeBattle([_monster()], player)

    ProcessPlayerAction(BattleAction("item", item=player.find_item("potion_minor")), state, player, SEED)

    assert player.stats.current_health == 30
    assert player.find_item("potion_minor").quantity == 1
    assert state.battle_log[-1] == "You used Minor Health Potion and recovered 20 HP!"


def test_full_heal_clamps_and_removes_last_item(player):
    player.stats.current_health = 10
    elixir = Item("elixir", "Elixir", consumable=ConsumableEffect(health=9999))
    player.add_item(elixir)
    state = InitializeBattle([_monster()], player)

    ProcessPlayerAction(BattleAction("item", item=elixir), state, player, SEED)

    assert player.stats.current_health == 100
    assert player.find_item("elixir") is None


def test_item_not_held(player):
    state = InitializeBattle([_monster()], player)
    potion = CreateStarterItem("potion_minor")
    ProcessPlayerAction(BattleAction("item", item=potion), state, player, SEED)
    assert state.battle_log[-1] == "You don't have any Minor Health Potion left!"


def test_item_missing(player):
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("item"), state, player, SEED)
    assert state.battle_log[-1] == "Item usage failed."


def test_antidote_cures_poison(player):
    player.add_item(CreateStarterItem("antidote"))
    state = InitializeBattle([_monster()], player)
    state.player_status.apply("poison", 3)

    ProcessPlayerAction(BattleAction("item", item=player.find_item("antidote")), state, player, SEED)

    assert not state.player_status.poisoned
    assert player.find_item("antidote") is None


def test_escape(player, pin_random):
    pin_random(0.0)
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("run"), state, player, SEED)
    assert state.battle_result == "escape"
    assert state.battle_log[-1] == "You successfully escaped from battle!"


def test_escape_is_final(player, pin_random):
    pin_random(0.0)
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("run"), state, player, SEED)
    before = state.to_dict()

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    ProcessMonsterAction(state, player, SEED)

    assert state.to_dict() == before
    assert state.monsters[0].stats.hp == 30
    assert player.stats.current_health == 100


def test_failed_escape(player, pin_random):
    pin_random(0.95)
    state = InitializeBattle([_monster()], player)
    ProcessPlayerAction(BattleAction("run"), state, player, SEED)
    assert state.battle_result == "ongoing"
    assert state.battle_log[-1] == "You failed to escape!"


def test_cannot_run(player, pin_random):
    pin_random(0.0)
    state = InitializeBattle([_monster()], player, can_run=False)
    ProcessPlayerAction(BattleAction("run"), state, player, SEED)
    assert state.battle_result == "ongoing"
    assert state.battle_log[-1] == "You cannot escape from this battle!"


# --- Ailments --------------------------------------------------------

def test_sleep_forfeits_turn(player):
    state = InitializeBattle([_monster()], player)
    state.player_status.apply("sleep", 2)

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert state.monsters[0].stats.hp == 30
    assert state.battle_log[-1] == "You are fast asleep and cannot act!"
    assert state.player_status.turns["sleep"] == 1
    assert not state.player_turn


def test_paralysis_wears_off(player):
    state = InitializeBattle([_monster()], player)
    state.player_status.apply("paralysis", 1)
    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    assert state.battle_log[-2:] == ["You are paralyzed and cannot move!", "You can move again!"]
    assert not state.player_status.paralyzed


def test_confusion_self_hit(player, pin_random):
    pin_random(0.0)
    state = InitializeBattle([_monster()], player)
    state.player_status.apply("confusion", 1)

    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)

    assert player.stats.current_health == 100 - PhysicalDamage(5, 5)
    assert state.monsters[0].stats.hp == 30
    assert "You are no longer confused." in state.battle_log


# --- Monster phase ---------------------------------------------------

def test_monster_phase_needs_monsters(player):
    state = BattleState([], [], player_turn=False)
    with pytest.raises(ValueError):
        ProcessMonsterAction(state, player, SEED)


def test_monster_phase_waits_for_its_turn(player):
    state = InitializeBattle([_monster()], player)
    ProcessMonsterAction(state, player, SEED)
    assert player.stats.current_health == 100
    assert state.current_round == 1


def test_monster_attack_and_new_round(player, pin_random):
    pin_random(0.5)
    state = InitializeBattle([_monster(attack=20)], player, ambush=True)

    ProcessMonsterAction(state, player, SEED)

    assert player.stats.current_health == 100 - 18
    assert "Rat uses Attack for 18 damage!" in state.battle_log
    assert state.battle_log[-1] == "Round 2 begins!"
    assert state.current_round == 2
    assert state.player_turn


def test_monster_defeats_player(player, pin_random):
    pin_random(0.5)
    player.stats.current_health = 1
    state = InitializeBattle([_monster(), _monster("Bat")], player, ambush=True)

    ProcessMonsterAction(state, player, SEED)

    assert state.battle_result == "defeat"
    assert state.battle_log[-1] == "You have been defeated!"
    assert player.stats.current_health == 0
    assert state.current_round == 1


def test_defeat_is_final(player, pin_random):
    pin_random(0.5)
    player.stats.current_health = 1
    state = InitializeBattle([_monster()], player, ambush=True)
    ProcessMonsterAction(state, player, SEED)
    assert state.battle_result == "defeat"
    before = state.to_dict()

    state.player_turn = True
    ProcessPlayerAction(BattleAction("attack", target=0), state, player, SEED)
    state.player_turn = False
    ProcessMonsterAction(state, player, SEED)

    state.player_turn = before["player_turn"]
    assert state.to_dict() == before
    assert state.monsters[0].stats.hp == 30
    assert state.battle_result == "defeat"


def test_zero_defense_counts_as_default(player, pin_random):
    pin_random(0.5)
    player.stats.defense = 0
    state = InitializeBattle([_monster(attack=20)], player, ambush=True)

    ProcessMonsterAction(state, player, SEED)

    assert player.stats.current_health == 100 - PhysicalDamage(20, 5)


def test_poison_ticks_after_monsters(player, pin_random):
    pin_random(0.5)
    weak = _monster(abilities=[MonsterAbility("Glare", kind="status")])
    state = InitializeBattle([weak], player, ambush=True)
    state.player_status.apply("poison", 1)

    ProcessMonsterAction(state, player, SEED)

    assert player.stats.current_health == 95
    assert "You take 5 poison damage!" in state.battle_log
    assert "The poison wears off." in state.battle_log


def test_status_ability_inflicts(player, pin_random):
    pin_random(0.5)
    spores = MonsterAbility("Spores", kind="status", status_effect=StatusEffect("sleep", 1.0, 2))
    state = InitializeBattle([_monster(abilities=[spores])], player, ambush=True)

    ProcessMonsterAction(state, player, SEED)

    assert state.player_status.sleeping
    assert "Rat's Spores inflicts sleep!" in state.battle_log
    assert player.stats.current_health == 100


def test_heal_ability(player, pin_random):
    pin_random(0.5)
    regen = MonsterAbility("Regenerate", kind="heal", heal_amount=10)
    troll = _monster("Troll", hp=20, abilities=[regen])
    troll.stats.hp = 5
    state = InitializeBattle([troll], player, ambush=True)

    ProcessMonsterAction(state, player, SEED)

    assert troll.stats.hp == 15
    assert "Troll uses Regenerate and recovers 10 HP!" in state.battle_log


def test_battle_replays_identically(player):
    def play():
        from player import Player
        hero = Player("Hero")
        state = InitializeBattle([_monster(hp=60, attack=12), _monster("Bat", hp=20)], hero)
        while not state.is_over and state.current_round < 30:
            if state.player_turn:
                ProcessPlayerAction(BattleAction("attack", target=0), state, hero, SEED)
            else:
                ProcessMonsterAction(state, hero, SEED)
        return state.battle_log

    assert play() == play()


# --- Rewards ---------------------------------------------------------

def test_rewards_scale_with_level(pin_random):
    pin_random(0.5)
    rewards = CalculateBattleRewards([_monster(level=3), _monster(level=5)], 4, "r")
    assert rewards.experience == 24 + 60
    assert rewards.gold == 15 + 25
    assert rewards.items == []


def test_reward_multiplier_extremes():
    high = CalculateBattleRewards([_monster(level=7)], 4, "r")
    low = CalculateBattleRewards([_monster(level=1)], 4, "r")
    assert high.experience == 105
    assert low.experience == 5


def test_rewards_accept_dicts_and_drops(pin_random):
    pin_random(0.0)
    rewards = CalculateBattleRewards(
        [{"name": "Wolf", "level": 2, "drops": [{"item_id": "wolf_pelt", "chance": 0.5, "min_quantity": 1, "max_quantity": 2}]}],
        2, "r",
    )
    assert rewards.experience == 20
    assert [(i.item_id, i.quantity) for i in rewards.items] == [("wolf_pelt", 1)]


def test_apply_rewards(player):
    rewards = BattleRewards(experience=40, gold=12, items=[
        RewardItem("potion_minor", 2), RewardItem("wolf_pelt", 1),
    ])
    ApplyBattleRewards(player, rewards, CreateStarterItem)
    assert player.experience == 40
    assert player.currency == 12
    assert player.find_item("potion_minor").quantity == 2
    assert player.find_item("wolf_pelt") is None


def test_rewards_bounded_by_drop_tables():
    monsters = [GenerateMonster("forest", 4, "drops-a"), GenerateMonster("desert", 4, "drops-b")]
    for level, monster in zip((3, 5), monsters):
        monster.level = level
    rewards = CalculateBattleRewards(monsters, 4, "drops")
    assert rewards.experience > 0
    assert rewards.gold > 0
    assert len(rewards.items) <= sum(len(m.drops) for m in monsters)
