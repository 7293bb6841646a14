# Code generated by late-generate. DO NOT EDIT.
from typing import Any

from .base import BaseClient
from .decorators import delete, get, patch, post, put


class Posts:
    """Posts API - Create, schedule, and manage social media posts"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/posts")
    async def listPosts(self, **params: Any) -> Any:
        """List posts visible to the authenticated user"""

    @post("/v1/posts")
    async def createPost(self, **params: Any) -> Any:
        """Create a draft, scheduled, or immediate post"""

    @get("/v1/posts/{postId}")
    async def getPost(self, **params: Any) -> Any:
        """Get a single post"""

    @put("/v1/posts/{postId}")
    async def updatePost(self, **params: Any) -> Any:
        """Update a draft or scheduled post"""

    @delete("/v1/posts/{postId}")
    async def deletePost(self, **params: Any) -> Any:
        """Delete a post"""

    @post("/v1/posts/{postId}/retry")
    async def retryPost(self, **params: Any) -> Any:
        """Retry publishing a failed or partial post"""

    @post("/v1/posts/bulk-upload")
    async def bulkUploadPosts(self, **params: Any) -> Any:
        """Validate and schedule multiple posts from CSV"""


class Accounts:
    """Accounts API - Manage connected social media accounts"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/accounts")
    async def listAccounts(self, **params: Any) -> Any:
        """List connected social accounts"""

    @put("/v1/accounts/{accountId}")
    async def updateAccount(self, **params: Any) -> Any:
        """Update a connected account"""

    @delete("/v1/accounts/{accountId}")
    async def deleteAccount(self, **params: Any) -> Any:
        """Disconnect an account"""

    @get("/v1/accounts/health")
    async def getAllAccountsHealth(self, **params: Any) -> Any:
        """Check the health of all connected accounts"""

    @get("/v1/accounts/{accountId}/health")
    async def getAccountHealth(self, **params: Any) -> Any:
        """Check the health of a specific account"""

    @get("/v1/accounts/follower-stats")
    async def getFollowerStats(self, **params: Any) -> Any:
        """Get follower stats and growth metrics"""

    @get("/v1/accounts/{accountId}/gmb-reviews")
    async def getGoogleBusinessReviews(self, **params: Any) -> Any:
        """Get Google Business Profile reviews"""

    @get("/v1/accounts/{accountId}/linkedin-mentions")
    async def getLinkedInMentions(self, **params: Any) -> Any:
        """Resolve a LinkedIn profile or company URL to a mention URN"""


class Profiles:
    """Profiles API - Manage workspace profiles"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/profiles")
    async def listProfiles(self, **params: Any) -> Any:
        """List profiles"""

    @post("/v1/profiles")
    async def createProfile(self, **params: Any) -> Any:
        """Create a profile"""

    @get("/v1/profiles/{profileId}")
    async def getProfile(self, **params: Any) -> Any:
        """Get a profile"""

    @put("/v1/profiles/{profileId}")
    async def updateProfile(self, **params: Any) -> Any:
        """Update a profile"""

    @delete("/v1/profiles/{profileId}")
    async def deleteProfile(self, **params: Any) -> Any:
        """Delete a profile with no connected accounts"""


class Analytics:
    """Analytics API - Get performance metrics"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/analytics")
    async def getAnalytics(self, **params: Any) -> Any:
        """Get unified analytics for published posts"""

    @get("/v1/analytics/youtube/daily-views")
    async def getYouTubeDailyViews(self, **params: Any) -> Any:
        """Get daily YouTube views for a video"""


class AccountGroups:
    """Account Groups API - Organize accounts into groups"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/account-groups")
    async def listAccountGroups(self, **params: Any) -> Any:
        """List account groups"""

    @post("/v1/account-groups")
    async def createAccountGroup(self, **params: Any) -> Any:
        """Create an account group"""

    @put("/v1/account-groups/{groupId}")
    async def updateAccountGroup(self, **params: Any) -> Any:
        """Rename or regroup accounts"""

    @delete("/v1/account-groups/{groupId}")
    async def deleteAccountGroup(self, **params: Any) -> Any:
        """Delete an account group"""


class Queue:
    """Queue API - Manage posting queue"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/queue/slots")
    async def listQueueSlots(self, **params: Any) -> Any:
        """List queue slots for a profile"""

    @post("/v1/queue/slots")
    async def createQueueSlot(self, **params: Any) -> Any:
        """Create a queue schedule"""

    @put("/v1/queue/slots")
    async def updateQueueSlot(self, **params: Any) -> Any:
        """Update a queue schedule"""

    @delete("/v1/queue/slots")
    async def deleteQueueSlot(self, **params: Any) -> Any:
        """Delete a queue schedule"""

    @get("/v1/queue/preview")
    async def previewQueue(self, **params: Any) -> Any:
        """Preview upcoming queue slots"""

    @get("/v1/queue/next-slot")
    async def getNextQueueSlot(self, **params: Any) -> Any:
        """Get the next available queue slot"""


class Webhooks:
    """Webhooks API - Configure event webhooks"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/webhooks/settings")
    async def getWebhookSettings(self, **params: Any) -> Any:
        """List webhooks"""

    @post("/v1/webhooks/settings")
    async def createWebhookSettings(self, **params: Any) -> Any:
        """Create a webhook"""

    @put("/v1/webhooks/settings")
    async def updateWebhookSettings(self, **params: Any) -> Any:
        """Update a webhook"""

    @delete("/v1/webhooks/settings")
    async def deleteWebhookSettings(self, **params: Any) -> Any:
        """Delete a webhook"""

    @post("/v1/webhooks/test")
    async def testWebhook(self, **params: Any) -> Any:
        """Send a test event to a webhook"""

    @get("/v1/webhooks/logs")
    async def getWebhookLogs(self, **params: Any) -> Any:
        """Get webhook delivery logs"""


class ApiKeys:
    """API Keys API - Manage API keys"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/api-keys")
    async def listApiKeys(self, **params: Any) -> Any:
        """List API keys"""

    @post("/v1/api-keys")
    async def createApiKey(self, **params: Any) -> Any:
        """Create an API key"""

    @delete("/v1/api-keys/{keyId}")
    async def deleteApiKey(self, **params: Any) -> Any:
        """Delete an API key"""


class Media:
    """Media API - Upload and manage media files"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @post("/v1/media/presign")
    async def getMediaPresignedUrl(self, **params: Any) -> Any:
        """Get a presigned URL for a direct media upload"""


class Tools:
    """Tools API - Media download and utilities"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/tools/youtube/download")
    async def downloadYouTubeVideo(self, **params: Any) -> Any:
        """Download a YouTube video or audio track"""

    @get("/v1/tools/instagram/download")
    async def downloadInstagramMedia(self, **params: Any) -> Any:
        """Download Instagram reels and posts"""

    @post("/v1/tools/instagram/hashtag-checker")
    async def checkInstagramHashtags(self, **params: Any) -> Any:
        """Check Instagram hashtags for bans"""


class Users:
    """Users API - User management"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/users")
    async def listUsers(self, **params: Any) -> Any:
        """List team users"""

    @get("/v1/users/{userId}")
    async def getUser(self, **params: Any) -> Any:
        """Get a user"""


class Usage:
    """Usage API - Get usage statistics"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/usage-stats")
    async def getUsageStats(self, **params: Any) -> Any:
        """Get plan and usage statistics"""


class Logs:
    """Logs API - Publishing logs"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/logs")
    async def listLogs(self, **params: Any) -> Any:
        """List publishing logs"""

    @get("/v1/logs/{logId}")
    async def getLog(self, **params: Any) -> Any:
        """Get a single log entry"""

    @get("/v1/posts/{postId}/logs")
    async def getPostLogs(self, **params: Any) -> Any:
        """Get publishing logs for a post"""


class ConnectFacebook:
    """Connect API - OAuth connection flows (facebook)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/facebook/select-page")
    async def listFacebookPages(self, **params: Any) -> Any:
        """List Facebook pages after OAuth"""

    @post("/v1/connect/facebook/select-page")
    async def selectFacebookPage(self, **params: Any) -> Any:
        """Select a Facebook page to connect"""


class ConnectGoogleBusiness:
    """Connect API - OAuth connection flows (googleBusiness)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/googlebusiness/locations")
    async def listGoogleBusinessLocations(self, **params: Any) -> Any:
        """List Google Business locations after OAuth"""

    @post("/v1/connect/googlebusiness/select-location")
    async def selectGoogleBusinessLocation(self, **params: Any) -> Any:
        """Select a Google Business location to connect"""


class ConnectLinkedin:
    """Connect API - OAuth connection flows (linkedin)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/linkedin/organizations")
    async def listLinkedInOrganizations(self, **params: Any) -> Any:
        """List LinkedIn organizations after OAuth"""

    @post("/v1/connect/linkedin/select-organization")
    async def selectLinkedInOrganization(self, **params: Any) -> Any:
        """Select a LinkedIn personal profile or organization"""


class ConnectPinterest:
    """Connect API - OAuth connection flows (pinterest)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/pinterest/select-board")
    async def listPinterestBoardsForSelection(self, **params: Any) -> Any:
        """List Pinterest boards after OAuth"""

    @post("/v1/connect/pinterest/select-board")
    async def selectPinterestBoard(self, **params: Any) -> Any:
        """Select a Pinterest board to connect"""


class ConnectSnapchat:
    """Connect API - OAuth connection flows (snapchat)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/snapchat/select-profile")
    async def listSnapchatProfiles(self, **params: Any) -> Any:
        """List Snapchat public profiles after OAuth"""

    @post("/v1/connect/snapchat/select-profile")
    async def selectSnapchatProfile(self, **params: Any) -> Any:
        """Select a Snapchat public profile to connect"""


class ConnectBluesky:
    """Connect API - OAuth connection flows (bluesky)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @post("/v1/connect/bluesky/credentials")
    async def connectBlueskyCredentials(self, **params: Any) -> Any:
        """Connect Bluesky with an app password"""


class ConnectTelegram:
    """Connect API - OAuth connection flows (telegram)"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/connect/telegram")
    async def getTelegramConnectStatus(self, **params: Any) -> Any:
        """Check the Telegram connection status"""

    @post("/v1/connect/telegram")
    async def initiateTelegramConnect(self, **params: Any) -> Any:
        """Generate a Telegram access code"""

    @patch("/v1/connect/telegram")
    async def completeTelegramConnect(self, **params: Any) -> Any:
        """Connect Telegram directly with a chat ID"""


class Connect:
    """Connect API - OAuth connection flows"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client
        self.facebook = ConnectFacebook(client)
        self.googleBusiness = ConnectGoogleBusiness(client)
        self.linkedin = ConnectLinkedin(client)
        self.pinterest = ConnectPinterest(client)
        self.snapchat = ConnectSnapchat(client)
        self.bluesky = ConnectBluesky(client)
        self.telegram = ConnectTelegram(client)

    @get("/v1/connect/{platform}")
    async def getConnectUrl(self, **params: Any) -> Any:
        """Start the OAuth connection flow for a platform"""

    @post("/v1/connect/{platform}")
    async def handleOAuthCallback(self, **params: Any) -> Any:
        """Complete the OAuth token exchange manually"""

    @get("/v1/connect/pending-data")
    async def getPendingOAuthData(self, **params: Any) -> Any:
        """Fetch pending OAuth selection data for headless flows"""


class Reddit:
    """Reddit API - Search and feed"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @get("/v1/reddit/search")
    async def searchReddit(self, **params: Any) -> Any:
        """Search Reddit posts through a connected account"""

    @get("/v1/reddit/feed")
    async def getRedditFeed(self, **params: Any) -> Any:
        """Fetch a subreddit feed through a connected account"""


class Invites:
    """Invites API - Team invitations"""

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    @post("/v1/invite/tokens")
    async def createInviteToken(self, **params: Any) -> Any:
        """Create a team member invite token"""


class Late(BaseClient):
    """Late API client with one attribute per namespace"""

    namespaces = (
        "posts",
        "accounts",
        "profiles",
        "analytics",
        "accountGroups",
        "queue",
        "webhooks",
        "apiKeys",
        "media",
        "tools",
        "users",
        "usage",
        "logs",
        "connect",
        "reddit",
        "invites",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.posts: Posts = Posts(self)
        self.accounts: Accounts = Accounts(self)
        self.profiles: Profiles = Profiles(self)
        self.analytics: Analytics = Analytics(self)
        self.accountGroups: AccountGroups = AccountGroups(self)
        self.queue: Queue = Queue(self)
        self.webhooks: Webhooks = Webhooks(self)
        self.apiKeys: ApiKeys = ApiKeys(self)
        self.media: Media = Media(self)
        self.tools: Tools = Tools(self)
        self.users: Users = Users(self)
        self.usage: Usage = Usage(self)
        self.logs: Logs = Logs(self)
        self.connect: Connect = Connect(self)
        self.reddit: Reddit = Reddit(self)
        self.invites: Invites = Invites(self)
