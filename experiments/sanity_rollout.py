# /experiments/sanity_rollout.py
"""
Score a baseline policy on StickEnv over a list of level seeds.

  random     holds or releases at random each decision
  heuristic  holds until the stick would reach the middle of the next platform

Usage (from repo root):
  python -m experiments.sanity_rollout --policy heuristic --seeds 101-120
  python -m experiments.sanity_rollout --policy random --frame-skip 1 --csv /tmp/random.csv
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import Callable, Dict, List, Optional

import numpy as np

from stickhero.env.stick_env import StickEnv

Policy = Callable[[np.ndarray], int]

FIELDS = ["policy", "seed", "decisions", "return", "score", "fell"]


def make_policy(name: str, seed: int) -> Policy:
    if name == "random":
        rng = np.random.RandomState(10_000 + seed)
        return lambda _obs: int(rng.randint(0, 2))
    if name == "heuristic":
        # obs = [stick_len, gap_near, gap_far, is_waiting, is_stretching]
        return lambda obs: int(obs[0] < 0.5 * (obs[1] + obs[2]))
    raise ValueError(f"Unknown policy: {name}")


def play_episode(env: StickEnv, policy: Policy, seed: int) -> Dict:
    obs, info = env.reset(seed=seed)
    total, decisions = 0.0, 0
    terminated = truncated = False
    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(policy(obs))
        total += float(reward)
        decisions += 1
    return {"seed": seed, "decisions": decisions, "return": round(total, 1),
            "score": int(info["score"]), "fell": int(terminated)}


def evaluate(name: str, seeds: List[int], frame_skip: int = 4,
             max_decisions: int = 2000, csv_path: Optional[Path] = None) -> List[Dict]:
    env = StickEnv(frame_skip=frame_skip, max_decisions=max_decisions)
    try:
        rows = [dict(policy=name, **play_episode(env, make_policy(name, s), s)) for s in seeds]
    finally:
        env.close()

    if csv_path is not None:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        new_file = not csv_path.exists()
        with csv_path.open("a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDS)
            if new_file:
                writer.writeheader()
            writer.writerows(rows)
    return rows


def parse_seeds(text: str) -> List[int]:
    """'101-105' or '7,8,9'."""
    if "-" in text.strip("-"):
        lo, hi = text.split("-", 1)
        return list(range(int(lo), int(hi) + 1))
    return [int(s) for s in text.split(",") if s.strip()]


def main():
    ap = argparse.ArgumentParser(description="Baseline rollouts on StickEnv")
    ap.add_argument("--policy", choices=["random", "heuristic"], default="heuristic")
    ap.add_argument("--seeds", type=parse_seeds, default=list(range(101, 121)))
    ap.add_argument("--frame-skip", type=int, default=4, help="sim frames per decision")
    ap.add_argument("--max-decisions", type=int, default=2000)
    ap.add_argument("--csv", type=Path, default=None, help="append episode rows here")
    args = ap.parse_args()

    rows = evaluate(args.policy, args.seeds, args.frame_skip, args.max_decisions, args.csv)
    for row in rows:
        print(f"[{row['policy']}] seed={row['seed']} score={row['score']} "
              f"decisions={row['decisions']} fell={row['fell']}")
    print(f"[{args.policy}] mean score {np.mean([r['score'] for r in rows]):.2f} over {len(rows)} seeds")


if __name__ == "__main__":
    main()
