"""Declarative deployment module API for bsc-nft-deployments library."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .exceptions import (
    CyclicDependencyError,
    DuplicateStepError,
    ModuleDefinitionError,
    UnknownDependencyError,
)
from .types import ContractStep, DeploymentModule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractFuture:
    """Placeholder for a contract instance that a step will produce."""

    module: str
    id: str
    contract_name: str


class ModuleBuilder:
    """Collects contract steps while a module recipe is being declared."""

    def __init__(self, name: str):
        self.name = name
        self._steps: Dict[str, ContractStep] = {}

    def contract(
        self,
        contract_name: str,
        args: Sequence[Any] = (),
        after: Iterable[ContractFuture] = (),
        id: Optional[str] = None,
    ) -> ContractFuture:
        """
        Declare a contract instantiation.

        Futures passed in args or after become dependencies of the new step.

        Args:
            contract_name: Contract type to deploy
            args: Constructor arguments (literals or ContractFutures)
            after: Futures that must be deployed first
            id: Step id (defaults to contract_name)

        Returns:
            ContractFuture for the new step

        Raises:
            DuplicateStepError: If the step id is already used in this module
            UnknownDependencyError: If a future belongs to another module
        """
        step_id = id or contract_name
        if step_id in self._steps:
            raise DuplicateStepError(
                f"Step '{step_id}' is declared twice in module '{self.name}'"
            )

        dependencies: List[str] = []
        for value in [*args, *after]:
            if not isinstance(value, ContractFuture):
                continue
            if value.module != self.name or value.id not in self._steps:
                raise UnknownDependencyError(
                    f"Step '{step_id}' depends on '{value.id}', "
                    f"which is not declared in module '{self.name}'"
                )
            if value.id not in dependencies:
                dependencies.append(value.id)

        self._steps[step_id] = ContractStep(
            id=step_id,
            contract_name=contract_name,
            args=tuple(_freeze(arg) for arg in args),
            dependencies=tuple(dependencies),
        )
        return ContractFuture(module=self.name, id=step_id, contract_name=contract_name)

    def steps(self) -> Dict[str, ContractStep]:
        return dict(self._steps)


def build_module(
    name: str,
    builder: Callable[[ModuleBuilder], Optional[Mapping[str, ContractFuture]]],
) -> DeploymentModule:
    """
    Declare a deployment module.

    Example:
        >>> module = build_module("NFTModule", lambda m: {"nftFactory": m.contract("NFTFactory")})
        >>> execution_order(module)
        ['NFTFactory']

    Args:
        name: Module name (unique within a deployment run)
        builder: Callback declaring steps; returns result name -> future

    Returns:
        Validated DeploymentModule

    Raises:
        ModuleDefinitionError: If the recipe is malformed
    """
    if not name:
        raise ModuleDefinitionError("Module name must not be empty")

    m = ModuleBuilder(name)
    futures = builder(m) or {}

    results: Dict[str, str] = {}
    for result_name, future in futures.items():
        if not isinstance(future, ContractFuture) or future.module != name:
            raise ModuleDefinitionError(
                f"Result '{result_name}' of module '{name}' is not a contract of this module"
            )
        results[result_name] = future.id

    module = DeploymentModule(name=name, steps=m.steps(), results=results)
    validate_module(module)
    return module


def _freeze(value: Any) -> Any:
    """Turn lists and mappings into tuples so steps stay hashable."""
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Mapping):
        return tuple((key, _freeze(item)) for key, item in value.items())
    return value


def from_mapping(data: Mapping[str, Any]) -> DeploymentModule:
    """
    Build a module from a plain mapping (e.g., parsed JSON).

    JSON arrays in args become tuples and JSON objects become tuples of
    (key, value) pairs.

    See DeploymentModule.from_dict for the expected shape.

    Raises:
        ModuleDefinitionError: If the mapping is malformed
    """
    if not isinstance(data, Mapping):
        raise ModuleDefinitionError(
            f"Module definition must be a mapping (got {type(data).__name__})"
        )

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ModuleDefinitionError("Module definition is missing a name")

    raw_steps = data.get("steps", [])
    if not isinstance(raw_steps, list):
        raise ModuleDefinitionError(f"Steps of module '{name}' must be a list")

    steps: Dict[str, ContractStep] = {}
    for index, raw in enumerate(raw_steps):
        if not isinstance(raw, Mapping):
            raise ModuleDefinitionError(
                f"Step #{index} of module '{name}' must be a mapping (got {type(raw).__name__})"
            )

        contract_name = raw.get("contract")
        if not isinstance(contract_name, str) or not contract_name:
            raise ModuleDefinitionError(
                f"Step #{index} of module '{name}' is missing a contract name"
            )

        step_id = raw.get("id") or contract_name
        if not isinstance(step_id, str):
            raise ModuleDefinitionError(
                f"Step #{index} of module '{name}' has a non-string id {step_id!r}"
            )
        if step_id in steps:
            raise DuplicateStepError(
                f"Step '{step_id}' is declared twice in module '{name}'"
            )

        args = raw.get("args", [])
        after = raw.get("after", [])
        for field_name, value in (("args", args), ("after", after)):
            if not isinstance(value, list):
                raise ModuleDefinitionError(
                    f"'{field_name}' of step '{step_id}' in module '{name}' must be a list"
                )
        if not all(isinstance(dep, str) for dep in after):
            raise ModuleDefinitionError(
                f"'after' of step '{step_id}' in module '{name}' must list step ids"
            )

        steps[step_id] = ContractStep(
            id=step_id,
            contract_name=contract_name,
            args=tuple(_freeze(arg) for arg in args),
            dependencies=tuple(after),
        )

    raw_results = data.get("results", {})
    if not isinstance(raw_results, Mapping):
        raise ModuleDefinitionError(f"Results of module '{name}' must be a mapping")
    results = dict(raw_results)
    for result_name, step_id in results.items():
        if not isinstance(step_id, str) or step_id not in steps:
            raise ModuleDefinitionError(
                f"Result '{result_name}' of module '{name}' refers to unknown step '{step_id}'"
            )

    module = DeploymentModule(name=name, steps=steps, results=results)
    validate_module(module)
    return module


def _find_cycle(module: DeploymentModule, pending: List[str]) -> List[str]:
    """Walk dependencies from the first pending step until a step repeats."""
    remaining = set(pending)
    start = pending[0]
    path: List[str] = []
    seen: Dict[str, int] = {}
    current = start
    while current not in seen:
        seen[current] = len(path)
        path.append(current)
        # Every remaining step has at least one remaining dependency
        current = next(
            dep for dep in module.steps[current].dependencies if dep in remaining
        )
    return path[seen[current]:] + [current]


def execution_order(module: DeploymentModule) -> List[str]:
    """
    Topological order of step ids.

    Among steps whose dependencies are satisfied, declaration order wins, so
    the result is deterministic.

    Raises:
        UnknownDependencyError: If a step depends on an undeclared step
        CyclicDependencyError: If the dependency graph has a cycle
    """
    for step in module.steps.values():
        for dep in step.dependencies:
            if dep not in module.steps:
                raise UnknownDependencyError(
                    f"Step '{step.id}' depends on '{dep}', "
                    f"which is not declared in module '{module.name}'"
                )

    order: List[str] = []
    done = set()
    pending = list(module.steps)

    while pending:
        ready = next(
            (
                step_id
                for step_id in pending
                if all(dep in done for dep in module.steps[step_id].dependencies)
            ),
            None,
        )
        if ready is None:
            cycle = _find_cycle(module, pending)
            raise CyclicDependencyError(
                f"Module '{module.name}' has a dependency cycle: {' -> '.join(cycle)}"
            )
        pending.remove(ready)
        done.add(ready)
        order.append(ready)

    return order


def validate_module(module: DeploymentModule) -> Tuple[str, ...]:
    """
    Check that a module's step graph is well formed.

    Returns:
        Step ids in execution order

    Raises:
        UnknownDependencyError: If a step depends on an undeclared step
        CyclicDependencyError: If the dependency graph has a cycle
    """
    order = tuple(execution_order(module))
    logger.debug("Module '%s' execution order: %s", module.name, order)
    return order
