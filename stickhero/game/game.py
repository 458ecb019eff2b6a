# stickhero/game/game.py
import sys, argparse, logging
from pathlib import Path
import pygame
from pygame import K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT
from .audio import PygameAudio, SAMPLE_RATE
from .controls import InputController
from .frames import FrameQueue
from .level import PlatformGenerator
from .machine import StickGame
from .render import Renderer, restart_button_rect


def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Level seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--mute", action="store_true", help="Start with sound off")
    p.add_argument("--sounds", type=Path, default=None,
                   help="Directory with stretch/drop/walk/fall sound files")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    return p.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None  # signals the generator to randomize
    else:
        launch_seed = args.seed

    # mixer settings only apply if set before pygame.init()
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
    pygame.init()
    pygame.display.set_caption("Stick Hero")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    audio = PygameAudio(sounds_dir=args.sounds, muted=args.mute)
    audio.init()

    frames = FrameQueue()
    game = StickGame(generator=PlatformGenerator(seed=launch_seed), audio=audio, frames=frames)
    renderer = Renderer(screen, font)
    controls = InputController(game, audio, restart_rect=restart_button_rect())

    # redraw after every applied frame and after reset
    dirty = True

    def on_change(_world):
        nonlocal dirty
        dirty = True

    game.subscribe(on_change)

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
                pygame.quit(); sys.exit()
            if controls.handle(event):
                dirty = True

        frames.run_frame(pygame.time.get_ticks())

        if dirty:
            renderer.draw(game.world)
            renderer.draw_hud(game.world, audio.muted)
            pygame.display.flip()
            dirty = False


if __name__ == "__main__":
    run()
