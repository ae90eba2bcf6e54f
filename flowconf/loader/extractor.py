"""
Config extractor: the `core` module state after execution -> Config.
"""

from flowconf.core.exceptions import InternalError, check_condition, check_not_missing
from flowconf.core.options import Options
from flowconf.engines.script import Environment
from flowconf.models import Config
from flowconf.modules import CORE_VAR, CoreModule


def extract_config(env: Environment, options: Options) -> Config:
    """
    Select the workflow named by options.workflow.workflow_name.

    Raises ConfigValidationError when no workflow was declared, the name is unknown
    (listing the valid names), or the project name was never set.
    """
    core = env.globals.get(CORE_VAR)
    if not isinstance(core, CoreModule):
        raise InternalError(f"'{CORE_VAR}' module is not bound in the environment")

    workflows = core.workflows
    check_condition(len(workflows) > 0, "At least one workflow is required.")

    workflow_name = options.workflow.workflow_name
    workflow = workflows.get(workflow_name)
    check_condition(
        workflow is not None,
        f"No workflow with '{workflow_name}' name exists. "
        f"Valid workflows: {sorted(workflows)}",
    )
    return Config(
        project_name=check_not_missing(core.project_name, "project"),
        active_workflow=workflow,
    )
