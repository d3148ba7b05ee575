"""Trailing guidance blocks appended to tool responses."""

from typing import Optional

from ..constants import OperationKind, require_exhaustive

GUIDANCE: dict[OperationKind, str] = {
    OperationKind.LIST_RESOURCES: (
        "\n\n🔄 USAGE REMINDER:\n"
        "- Use 'get_specific_aptos_resource' with exact filename to get detailed guidance\n"
        "- Use 'get_aptos_resources' with context for smart recommendations\n"
        "- Use 'debug_aptos_issue' when stuck or encountering errors\n"
        "- Always validate your implementation with 'validate_current_implementation'"
    ),
    OperationKind.SPECIFIC_RESOURCE: (
        "\n\n🔄 FOLLOW-UP ACTIONS:\n"
        "- If this doesn't fully solve your issue, use 'debug_aptos_issue' with specific details\n"
        "- After implementing, use 'validate_current_implementation' to verify correctness\n"
        "- For related integrations, check other relevant resources with 'get_aptos_resources'\n"
        "- Don't fall back to generic solutions - consult MCP first"
    ),
    OperationKind.SPECIFIC_RESOURCE_BY_NAME: (
        "\n\n🔄 NEXT STEPS:\n"
        "- Implement following this Aptos-specific guidance\n"
        "- Use 'validate_current_implementation' after changes\n"
        "- If issues arise, use 'debug_aptos_issue' instead of guessing\n"
        "- Check related resources if needed"
    ),
    OperationKind.AUTO_SELECTED: (
        "\n\n🔄 IMPORTANT:\n"
        "- Follow this Aptos-specific guidance precisely\n"
        "- Use 'validate_current_implementation' after implementing\n"
        "- If you encounter issues, use 'debug_aptos_issue' with specifics\n"
        "- Don't mix with generic blockchain approaches"
    ),
    OperationKind.NO_MATCH: (
        "\n\n🔄 NEXT STEPS:\n"
        "- Use 'get_specific_aptos_resource' with exact filename\n"
        "- Use 'debug_aptos_issue' with your specific problem\n"
        "- Refine your context and try again"
    ),
    OperationKind.MULTIPLE_MATCHES: (
        "\n\n🔄 NEXT STEPS:\n"
        "- Use 'get_specific_aptos_resource' with the most relevant filename\n"
        "- Or use 'debug_aptos_issue' with your specific problem for targeted guidance\n"
        "- Remember: Always prefer Aptos-specific solutions from MCP over generic approaches"
    ),
    OperationKind.OVERVIEW: (
        "\n\n🔄 USAGE GUIDANCE:\n"
        "- Provide specific context for smart resource recommendations\n"
        "- Use exact filenames with 'get_specific_aptos_resource'\n"
        "- Use 'debug_aptos_issue' when stuck with specific problems\n"
        "- Regularly validate with 'validate_current_implementation'"
    ),
    OperationKind.BUILD_SMART_CONTRACT: (
        "\n\n🔄 IMPORTANT REMINDERS:\n"
        "- If you get stuck implementing any part, use 'debug_aptos_issue' with your specific problem\n"
        "- Before proceeding to frontend, use 'validate_current_implementation' to ensure Move code follows best practices\n"
        "- For specific integrations (wallet, gas station, indexer), use 'get_aptos_resources' with relevant context\n"
        "- If errors occur, always consult MCP tools before trying generic solutions"
    ),
    OperationKind.BUILD_FRONTEND: (
        "\n\n🔄 IMPORTANT REMINDERS:\n"
        "- If wallet connection fails, use 'get_specific_aptos_resource' with 'how_to_add_wallet_connection'\n"
        "- For transaction signing issues, use 'debug_aptos_issue' with your specific error\n"
        "- Before deploying, use 'validate_current_implementation' to check integration patterns\n"
        "- For rate limiting or API issues, consult 'how_to_handle_rate_limit_in_a_dapp' resource"
    ),
    OperationKind.BUILD_DAPP: (
        "\n\n🔄 IMPORTANT REMINDERS:\n"
        "- At each development phase, use 'validate_current_implementation' to ensure you're following Aptos best practices\n"
        "- If you encounter ANY errors or get stuck, use 'debug_aptos_issue' instead of guessing\n"
        "- Before final deployment, use 'pre_deployment_checklist' to verify everything\n"
        "- Keep consulting MCP resources throughout development - don't rely on general blockchain knowledge"
    ),
}

require_exhaustive(GUIDANCE, OperationKind)


def compose(base_text: str, kind: OperationKind, context: Optional[str] = None) -> str:
    """Append the guidance block for an operation to a core result.

    Args:
        base_text: Document content or listing, returned unchanged as prefix
        kind: Operation whose guidance block to append
        context: Query that auto-selected the document (AUTO_SELECTED only)

    Returns:
        Final response text
    """
    guidance = GUIDANCE[kind]
    if kind is OperationKind.AUTO_SELECTED and context is not None:
        guidance = f'\n\n🎯 This resource was auto-selected for context: "{context}"' + guidance
    return base_text + guidance
