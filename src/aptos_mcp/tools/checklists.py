"""Checklists and targeted guidance for the debugging and validation tools."""

from typing import Optional

from ..constants import (
    DeploymentTarget,
    DevelopmentContext,
    ImplementationArea,
    require_exhaustive,
)

# Resources (or whole categories) to consult per debugging context
CONTEXT_RESOURCES: dict[DevelopmentContext, tuple[str, ...]] = {
    DevelopmentContext.WALLET_CONNECTION: (
        "how_to_add_wallet_connection",
        "how_to_integrate_wallet_selector_ui",
    ),
    DevelopmentContext.TRANSACTION_SIGNING: ("how_to_sign_and_submit_transaction",),
    DevelopmentContext.API_SETUP: (
        "how_to_config_a_full_node_api_key_in_a_dapp",
        "how_to_handle_rate_limit_in_a_dapp",
    ),
    DevelopmentContext.MOVE_CONTRACT: ("move",),
    DevelopmentContext.FRONTEND_INTEGRATION: ("frontend",),
    DevelopmentContext.DEPLOYMENT: ("management",),
    DevelopmentContext.OTHER: (),
}

VALIDATION_POINTS: dict[ImplementationArea, tuple[str, ...]] = {
    ImplementationArea.MOVE_CONTRACT: (
        "Are you using proper Aptos Move syntax and not generic Move?",
        "Have you checked 'move' resources in MCP for Aptos-specific patterns?",
        "Are you handling capabilities and permissions correctly?",
        "Consider consulting management resources for deployment best practices",
    ),
    ImplementationArea.WALLET_INTEGRATION: (
        "Are you using the latest Aptos wallet standards?",
        "Check 'how_to_add_wallet_connection' for current best practices",
        "Verify wallet selector implementation with 'how_to_integrate_wallet_selector_ui'",
        "Ensure you're not using outdated wallet connection methods",
    ),
    ImplementationArea.TRANSACTION_HANDLING: (
        "Are you following Aptos transaction signing patterns?",
        "Check 'how_to_sign_and_submit_transaction' for proper implementation",
        "Verify gas station integration if applicable",
        "Ensure proper error handling for Aptos-specific errors",
    ),
    ImplementationArea.API_CONFIGURATION: (
        "Are you using proper Aptos API endpoints and keys?",
        "Check 'how_to_config_a_full_node_api_key_in_a_dapp' for setup guidance",
        "Verify rate limiting configuration with 'how_to_handle_rate_limit_in_a_dapp'",
        "Ensure you're using Aptos-specific API patterns",
    ),
    ImplementationArea.FRONTEND_SETUP: (
        "Are you using Aptos-specific frontend integration patterns?",
        "Check frontend resources in MCP for current best practices",
        "Verify wallet connection and transaction signing flows",
        "Ensure proper error handling for Aptos frontend errors",
    ),
    ImplementationArea.FULL_STACK: (
        "Are all components following Aptos-specific patterns?",
        "Have you validated each layer separately?",
        "Check integration patterns between Move contracts and frontend",
        "Verify end-to-end transaction flows work correctly",
    ),
}

DEPLOYMENT_VALIDATION: tuple[str, ...] = (
    "Use 'validate_current_implementation' for each component",
    "Check all MCP resources for deployment-specific guidance",
    "Verify API keys and rate limiting configuration",
    "Test wallet connections with multiple wallet types",
    "Validate transaction signing flows",
)

DEPLOYMENT_RESOURCES: tuple[str, ...] = (
    "'how_to_config_a_full_node_api_key_in_a_dapp'",
    "'how_to_handle_rate_limit_in_a_dapp'",
    "Management resources for deployment procedures",
    "All relevant how_to guides for your specific integrations",
)

require_exhaustive(CONTEXT_RESOURCES, DevelopmentContext)
require_exhaustive(VALIDATION_POINTS, ImplementationArea)


def debug_guidance(
    issue_description: str,
    context: DevelopmentContext,
    error_message: Optional[str] = None,
) -> str:
    """Targeted guidance for a reported problem."""
    guidance = f"🔍 TARGETED APTOS GUIDANCE for: {issue_description}\n\n"

    if error_message:
        guidance += f"❌ Error: {error_message}\n\n"

    resources = CONTEXT_RESOURCES[context]
    if resources:
        guidance += "📚 RECOMMENDED NEXT STEPS:\n"
        guidance += f"1. Consult these specific Aptos resources: {', '.join(resources)}\n"
        guidance += (
            "2. Use 'get_specific_aptos_resource' or 'get_aptos_resources' "
            f'with context: "{context.value}"\n'
        )
        guidance += "3. Compare your approach with Aptos best practices from MCP resources\n\n"

    guidance += "🔄 IMPORTANT: Don't guess or use generic blockchain solutions. Always:\n"
    guidance += "- Check MCP resources first before trying alternative approaches\n"
    guidance += "- Use 'validate_current_implementation' after making changes\n"
    guidance += "- If still stuck, provide more specific details to this tool\n\n"

    guidance += "📋 To get specific resources, use:\n"
    guidance += "- get_specific_aptos_resource with exact filename\n"
    guidance += f'- get_aptos_resources with context: "{context.value}"\n'
    return guidance


def validation_checklist(
    area: ImplementationArea,
    specific_concern: Optional[str] = None,
    current_approach: Optional[str] = None,
) -> str:
    """Numbered validation checklist for an implementation area."""
    validation = f"✅ APTOS VALIDATION CHECKLIST for: {area.value}\n\n"

    if current_approach:
        validation += f"🔍 Current Approach: {current_approach}\n\n"

    validation += "📋 VALIDATION POINTS:\n"
    for index, point in enumerate(VALIDATION_POINTS[area], start=1):
        validation += f"{index}. {point}\n"

    validation += "\n🔄 NEXT STEPS:\n"
    validation += f"- Use 'get_aptos_resources' with context related to {area.value}\n"
    validation += "- If any validation points fail, use 'debug_aptos_issue' with specific details\n"
    validation += "- Regularly re-validate as you make changes\n"

    if specific_concern:
        validation += f"\n⚠️  Specific Concern: {specific_concern}\n"
        validation += (
            "Consider using 'debug_aptos_issue' with this specific concern "
            "for targeted guidance.\n"
        )
    return validation


def deployment_checklist(target: DeploymentTarget) -> str:
    """Pre-deployment checklist for a network."""
    checklist = f"📋 APTOS {target.value.upper()} DEPLOYMENT CHECKLIST\n\n"

    checklist += "🔍 FINAL VALIDATION REQUIRED:\n"
    checklist += "".join(f"□ {item}\n" for item in DEPLOYMENT_VALIDATION)
    checklist += "\n📚 CRITICAL MCP RESOURCES TO REVIEW:\n"
    checklist += "".join(f"□ {item}\n" for item in DEPLOYMENT_RESOURCES)

    checklist += "\n⚠️  BEFORE PROCEEDING:\n"
    checklist += (
        "If ANY item is unclear or incomplete, use 'debug_aptos_issue' "
        "or consult specific MCP resources.\n"
    )
    checklist += "Do NOT proceed with deployment using generic blockchain knowledge.\n"
    return checklist
