# directory main.py

import sys
import json

from worldgen import GenerateWorld, GenerateMapChunk, GenerateAdventureOptions, BuildTileGrid
from settlements import GenerateWorldTowns
from roads import GenerateRoadNetwork
from world_index import WorldIndex
from world_visual import PrintWorldMap, FormatTownTable, RenderWorldMap
from world_report import PrintWorldReport
from monsters import GenerateMonsterEncounter
from combat import InitializeBattle, ProcessPlayerAction, ProcessMonsterAction, BattleAction, ApplyBattleRewards
from item_catalog import CreateStarterItem
from player import Player
from save_snapshot import BuildSaveSnapshot, BuildSaveMetadata
from worldgen_config import LoadWorldgenConfig, ApplyWorldgenConfig

MAX_BATTLE_ROUNDS = 50


def CreateWorld(seed):
    """World, full map, towns and roads for a seed. Returns (world, tiles, towns, roads)."""
    world = GenerateWorld(seed)
    last = world.map_size - 1
    tiles = GenerateMapChunk(seed, 0, 0, last, last, world)

    towns = GenerateWorldTowns(world, tiles)
    roads = GenerateRoadNetwork(world, towns, tiles)

    # towns and roads change tile text
    GenerateAdventureOptions(BuildTileGrid(tiles), seed)
    return world, tiles, towns, roads


def FindEncounter(world, tiles, player, max_steps=200):
    """Roll encounters on tiles around the player until one triggers."""
    index = WorldIndex(tiles)
    x, y = player.position
    for step, tile in enumerate(index.tiles_within_radius(x, y, world.map_size)):
        if step >= max_steps:
            break
        encounter = GenerateMonsterEncounter(tile, world.seed, player.level, encounter_seed=step)
        if encounter.triggered:
            return tile, encounter
    return None, None


def RunBattle(encounter, player, seed):
    """Attack the first live monster every turn until the battle ends."""
    state = InitializeBattle(encounter.monsters, player, encounter.can_run, encounter.ambush)

    while not state.is_over and state.current_round <= MAX_BATTLE_ROUNDS:
        if state.player_turn:
            if player.stats.current_health < player.stats.max_health // 3 and player.find_item("potion_minor"):
                action = BattleAction("item", item=player.find_item("potion_minor"))
            else:
                action = BattleAction("attack", target=0)
            state, player = ProcessPlayerAction(action, state, player, seed)
        else:
            state, player = ProcessMonsterAction(state, player, seed)

    for line in state.battle_log:
        print("  " + line)

    if state.battle_result == "victory":
        ApplyBattleRewards(player, state.rewards, CreateStarterItem)
    return state


# --- Main entry
def Main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    seed = argv[0] if argv else "mysecret"
    if len(argv) > 1:
        ApplyWorldgenConfig(LoadWorldgenConfig(argv[1]))

    world, tiles, towns, roads = CreateWorld(seed)

    PrintWorldMap(tiles, roads, show_legend=False)
    print()
    print(FormatTownTable(towns))
    PrintWorldReport(tiles, towns)
    RenderWorldMap(tiles, towns, roads, out_path=f"world-{seed}.png", title=world.name)

    root = next((t for t in towns if t.parent_id is None), None)
    player = Player(
        "Adventurer",
        position=root.position if root else world.center,
        inventory=[CreateStarterItem("potion_minor", 3), CreateStarterItem("antidote")],
    )

    tile, encounter = FindEncounter(world, tiles, player)
    if encounter is None:
        print("⚠️ No encounter found near the starting town.")
    else:
        print(f"\n=== BATTLE at ({tile.x},{tile.y}) {tile.biome} ===")
        state = RunBattle(encounter, player, f"{seed}-battle")
        print(f"Result: {state.battle_result} | {player}")

    snapshot = BuildSaveSnapshot(world, tiles, towns, player, timestamp=0)
    print(json.dumps(BuildSaveMetadata(snapshot, f"save-{seed}"), indent=2))


# Execute Main
if __name__ == '__main__':
    Main()
