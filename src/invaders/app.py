"""
Invaders game: the frame loop and the command line entry point
"""

from __future__ import annotations

import argparse
import random

import pygame

from invaders.config import Settings
from invaders.constants import BACKGROUND_COLOR, FPS, TEXT_COLOR
from invaders.controls import handle_event
from invaders.utils import configure_logging, logger, set_screen
from invaders.world import Outcome, World

BANNERS = {
    Outcome.WON: "You won! Press R to play again",
    Outcome.LOST: "Game over! Press R to play again",
}


class Game:
    """
    Window, clock and the event-pump-then-step loop shared by games.
    Subclasses provide the event handling and the per-frame step.
    """

    _carry_on = True

    def __init__(self, name: str):
        """
        :param name: Window caption, also used in log messages
        :type name: str
        """
        logger.debug(f"Initializing {name}")
        self._name = name
        self._clock = pygame.time.Clock()
        self._fps = FPS
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Open the window the frame loop draws on

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :return: pygame.Surface
        :rtype: pygame.Surface
        """
        logger.debug(f"Opening {width}x{height} window")

        return set_screen(self._name, width, height)

    def handle_events(self):
        """
        Drain the pygame event queue once per frame

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def step(self):
        """
        Clear, update, draw and clean up one frame. Called after the
        events of that frame were handled and before the display flip.

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def run(self):
        """
        Tick the clock, pump events, step and flip until asked to quit
        """
        logger.debug("Running the game")

        while self._carry_on:
            self._clock.tick(self._fps)
            self.handle_events()
            self.step()
            pygame.display.flip()

        pygame.quit()


class InvadersGame(Game):
    """
    Invaders game
    """

    def __init__(
        self,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        screen: pygame.Surface | None = None,
    ):
        """
        :param settings: Game settings
        :type settings: Settings | None

        :param rng: Random source for enemy fire
        :type rng: random.Random | None

        :param screen: Surface to draw on, a window is opened when omitted
        :type screen: pygame.Surface | None
        """
        self.settings = settings or Settings()
        super().__init__(self.settings.window.title)

        window = self.settings.window
        if screen is None:
            screen = self._set_screen(window.width, window.height)
        self._screen = screen
        self._fps = window.fps
        self._font = pygame.font.Font(None, 32)
        self._rng = rng or random.Random()

        self.world = World.create(self.settings, self._rng)

    def restart(self):
        """
        Start a new game, keeping the current input state
        """
        logger.info("Restarting the game")
        keyboard, mouse = self.world.keyboard, self.world.mouse
        self.world = World.create(self.settings, self._rng)
        self.world.keyboard, self.world.mouse = keyboard, mouse

    def handle_events(self):
        """
        Quit on window close or Escape, restart on R once the game is
        decided, and feed everything else to the input state.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif (
                event.type == pygame.KEYDOWN
                and event.key == pygame.K_r
                and self.world.finished
            ):
                self.restart()
            else:
                handle_event(event, self.world.keyboard, self.world.mouse)

    def handle_objects(self):
        """
        Update and draw every entity. Once the game is decided entities are
        only drawn.
        """
        world = self.world
        live = not world.finished

        if live:
            world.player.update(world)
        world.player.draw(self._screen)

        for projectile in world.projectiles:
            if live:
                projectile.update(world)
            projectile.draw(self._screen)

        for row in world.enemy_rows:
            if live:
                row.update(world)
            row.draw(self._screen)

        for shield in world.shields:
            if live:
                shield.update(world)
            shield.draw(self._screen)

    def draw_banner(self):
        text = self._font.render(BANNERS[self.world.outcome], True, TEXT_COLOR)
        rect = text.get_rect(center=self._screen.get_rect().center)
        self._screen.blit(text, rect)

    def step(self):
        """
        Clear the surface, update and draw the entities, drop the destroyed
        ones and advance the frame counter.
        """
        self._screen.fill(BACKGROUND_COLOR)
        self.handle_objects()
        self.world.cleanup()
        self.world.frame += 1
        if self.world.check_outcome() is not Outcome.PLAYING:
            self.draw_banner()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Row-marching invaders arcade game")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for enemy fire")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None):
    """
    Main entry point for Invaders.

    - Parses the command line options.
    - Builds the settings tree, applying the overrides.
    - Opens the window and runs the frame loop.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    settings_data = {}
    if args.fps is not None:
        settings_data["window"] = {"fps": args.fps}
    settings = Settings.from_dict(settings_data)

    logger.info("Starting Invaders...")
    logger.info(settings.to_dict())
    game = InvadersGame(settings, rng=random.Random(args.seed))
    game.run()


if __name__ == "__main__":
    run()
