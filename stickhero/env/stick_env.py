# stickhero/env/stick_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from stickhero.game.config import WIDTH, HEIGHT
from stickhero.game.audio import SilentAudio
from stickhero.game.frames import FrameQueue
from stickhero.game.level import PlatformGenerator
from stickhero.game.machine import StickGame
from stickhero.game.render import Renderer
from stickhero.game.world import Phase
from stickhero.env.observations import build_observation, OBS_SIZE

# phases that play out without any input
AUTO_PHASES = (Phase.TURNING, Phase.WALKING, Phase.TRANSITIONING, Phase.FALLING)


class StickEnv(gym.Env):
    """
    Stick Hero Gymnasium environment (vector observations).
    - Simulation at 60 Hz of synthetic time, fed through the game's FrameQueue.
    - Agent acts every `frame_skip` frames; 0 = not holding, 1 = holding.
    - Once the stick drops, the env fast-forwards until the hero waits
      again or the run is over, so every decision concerns a stick.
    - Observation: shape (5,), float32, see build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 max_decisions: Optional[int] = 2000,
                 max_auto_frames: int = 10_000):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.max_decisions = max_decisions
        self.max_auto_frames = int(max_auto_frames)

        # Internal sim timing (ms, same unit as the game's speeds)
        self.sim_fps = 60
        self.dt_ms = 1000.0 / self.sim_fps

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=0.0, high=1.0, shape=(OBS_SIZE,), dtype=np.float32)

        # --- Runtime state ---
        self.frames = FrameQueue()
        self.game: Optional[StickGame] = None
        self.clock_ms: float = 0.0
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.renderer: Optional[Renderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Explicit seed -> used directly for the level; otherwise derived from np_random
        if seed is not None:
            level_seed = int(seed)
        else:
            level_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.frames.clear()
        self.game = StickGame(generator=PlatformGenerator(seed=level_seed),
                              audio=SilentAudio(), frames=self.frames)
        self.clock_ms = 0.0
        self.timestep = 0
        self.current_seed = level_seed

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "call reset() before step()"

        score_before = self.game.score
        if int(action) == 1:
            self.game.press()
        else:
            self.game.release()

        for _ in range(self.frame_skip):
            self._tick()

        auto_frames = 0
        while (self.game.phase in AUTO_PHASES and not self.game.game_over
               and auto_frames < self.max_auto_frames):
            self._tick()
            auto_frames += 1

        reward = float(self.game.score - score_before)
        if self.game.game_over:
            reward -= 1.0

        self.timestep += 1
        terminated = self.game.game_over
        truncated = (self.max_decisions is not None) and (self.timestep >= self.max_decisions)

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, bool(truncated), self._info()

    # -------------------- Helpers --------------------

    def _tick(self) -> None:
        self.clock_ms += self.dt_ms
        self.frames.run_frame(self.clock_ms)

    def _get_obs(self) -> np.ndarray:
        assert self.game is not None
        return build_observation(self.game.world)

    def _info(self) -> Dict[str, Any]:
        assert self.game is not None
        return {
            "seed": self.current_seed,
            "score": self.game.score,
            "phase": self.game.phase.value,
            "timestep": self.timestep,
            "game_over": self.game.game_over,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Stick Hero - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.renderer = Renderer(self.screen)

        self.renderer.draw(self.game.world)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        # (H, W, 3) uint8 array
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.renderer = None
