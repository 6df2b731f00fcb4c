from vendor_clients.sources.client.github.github import GitHubClient, GitHubConfig, GitHubRESTClient

__all__ = ["GitHubClient", "GitHubConfig", "GitHubRESTClient"]
