from .resource_request_dto import ErrorResponseDTO, ResourceRequestDTO, ResourceResponseDTO

__all__ = ["ErrorResponseDTO", "ResourceRequestDTO", "ResourceResponseDTO"]
