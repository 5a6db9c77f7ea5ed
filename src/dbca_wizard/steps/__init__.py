"""The concrete wizard steps, in presentation order."""

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.config_options import ConfigOptionsStep
from dbca_wizard.steps.creation_mode import CreationModeStep
from dbca_wizard.steps.credentials import CredentialsStep
from dbca_wizard.steps.datavault import DataVaultStep
from dbca_wizard.steps.delete import DeleteStep
from dbca_wizard.steps.deployment import DeploymentStep
from dbca_wizard.steps.identification import IdentificationStep
from dbca_wizard.steps.management import ManagementStep
from dbca_wizard.steps.network import NetworkStep
from dbca_wizard.steps.operation import OperationStep
from dbca_wizard.steps.recovery import RecoveryStep
from dbca_wizard.steps.review import ReviewStep
from dbca_wizard.steps.storage import StorageStep
from dbca_wizard.steps.template import TemplateStep
from dbca_wizard.wizard.protocol import Step


def build_steps(theme: Theme = DEFAULT_THEME, show_passwords: bool = False) -> list[Step]:
    """Create a fresh instance of every step."""
    return [
        OperationStep(theme),
        CreationModeStep(theme),
        DeploymentStep(theme),
        TemplateStep(theme),
        IdentificationStep(theme),
        StorageStep(theme),
        RecoveryStep(theme),
        NetworkStep(theme),
        DataVaultStep(theme),
        ConfigOptionsStep(theme),
        ManagementStep(theme),
        CredentialsStep(theme),
        DeleteStep(theme),
        ReviewStep(theme, show_passwords=show_passwords),
    ]


__all__ = [
    "ConfigOptionsStep",
    "CreationModeStep",
    "CredentialsStep",
    "DataVaultStep",
    "DeleteStep",
    "DeploymentStep",
    "IdentificationStep",
    "ManagementStep",
    "NetworkStep",
    "OperationStep",
    "RecoveryStep",
    "ReviewStep",
    "StorageStep",
    "TemplateStep",
    "build_steps",
]
