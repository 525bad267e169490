"""
Navigation between the selection, results and clause detail screens.

Screens hand each other plain identifiers only. Every screen gets a fresh
controller that resolves its identifier itself, so any route can also be
opened directly from a saved link.
"""

import logging
from typing import List, Optional, Union

from legalflow.config import Config
from legalflow.controllers import ClauseController, LoadState, ResultController, UploadController
from legalflow.routes import Route, Screen
from legalflow.storage.sources import ClauseSource, ResultSource, Submitter

logger = logging.getLogger(__name__)

ScreenController = Union[UploadController, ResultController, ClauseController]

class NavigationFlow:
    """State machine over routes with a back history."""
    
    def __init__(self,
                 submitter: Submitter,
                 result_source: ResultSource,
                 clause_source: ClauseSource,
                 config: Optional[Config] = None):
        """
        Initialize the flow on the selection screen.
        
        Args:
            submitter: Submission strategy for the selection screen
            result_source: Retrieval strategy for the results screen
            clause_source: Retrieval strategy for the clause detail screen
            config: Configuration settings, or use defaults
        """
        self.submitter = submitter
        self.result_source = result_source
        self.clause_source = clause_source
        self.config = config or Config()
        
        self.history: List[Route] = []
        self.route: Route = Route.selection()
        self.screen: ScreenController = self._create_screen(self.route)
    
    @property
    def path(self) -> str:
        return self.route.path
    
    async def open(self, route: Route) -> ScreenController:
        """
        Show a route, keeping the current one in the history.
        
        Args:
            route: Route to show
            
        Returns:
            The new screen's controller, loaded if it retrieves data
        """
        self._show(route, push=True)
        return await self._load_screen()
    
    async def open_path(self, path: str) -> ScreenController:
        return await self.open(Route.parse(path))
    
    async def submit(self) -> Optional[str]:
        """
        Submit the selection and, once it resolves, open its results.
        
        Returns:
            The document id, or None if the submission did not succeed
        """
        screen = self._require(Screen.SELECTION)
        document_id = await screen.submit()
        if document_id is None:
            return None
        await self.open(Route.results(document_id))
        return document_id
    
    async def open_clause(self, clause_id: str) -> ClauseController:
        """Open the detail screen of a clause listed on the results screen."""
        self._require(Screen.RESULTS)
        return await self.open(Route.clause(clause_id))
    
    async def back_to_results(self) -> ResultController:
        """
        Return from a loaded clause to its document's results.
        
        Returns:
            A fresh results controller for the clause's document id
        """
        screen = self._require(Screen.CLAUSE_DETAIL)
        if screen.state is not LoadState.READY:
            raise ValueError("Clause is not loaded; use go_back() instead")
        
        target = Route.results(screen.document_id)
        if self.history and self.history[-1] == target:
            self.history.pop()
        self._show(target, push=False)
        return await self._load_screen()
    
    async def go_back(self) -> ScreenController:
        """Return to the previous route, or the selection screen if there is none."""
        route = self.history.pop() if self.history else Route.selection()
        self._show(route, push=False)
        return await self._load_screen()
    
    def _show(self, route: Route, push: bool) -> None:
        self.screen.dispose()
        if push:
            self.history.append(self.route)
        logger.info(f"Navigating {self.route.path} -> {route.path}")
        self.route = route
        self.screen = self._create_screen(route)
    
    async def _load_screen(self) -> ScreenController:
        screen = self.screen
        if isinstance(screen, (ResultController, ClauseController)):
            await screen.load()
        return screen
    
    def _create_screen(self, route: Route) -> ScreenController:
        if route.screen is Screen.RESULTS:
            return ResultController(route.identifier, self.result_source, self.config.EXCERPT_LENGTH)
        if route.screen is Screen.CLAUSE_DETAIL:
            return ClauseController(route.identifier, self.clause_source)
        return UploadController(self.submitter, self.config)
    
    def _require(self, screen: Screen) -> ScreenController:
        if self.route.screen is not screen:
            raise ValueError(f"Expected the {screen.value} screen, currently on {self.route.path}")
        return self.screen
