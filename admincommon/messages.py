"""Message texts, i18n message ids and redis key prefixes shared by services."""

# Plain error messages returned to callers.
ERR_MSG_SUCCESS = "successful"
ERR_MSG_FAIL = "failed"
ERR_MSG_CREATE_SUCCESS = "create successfully"
ERR_MSG_CREATE_FAIL = "create failed"
ERR_MSG_UPDATE_SUCCESS = "update successfully"
ERR_MSG_UPDATE_FAIL = "update failed"
ERR_MSG_DELETE_SUCCESS = "delete successfully"
ERR_MSG_DELETE_FAIL = "delete successfully"
ERR_MSG_TARGET_NOT_FOUND = "target does not exist"
ERR_MSG_CONSTRAINT_ERROR = "data conflict"
ERR_MSG_VALIDATION_ERROR = "validate failed"
ERR_MSG_NOT_SINGULAR_ERROR = "data is not unique"
ERR_MSG_DATABASE_ERROR = "database error"
ERR_MSG_REDIS_ERROR = "redis error"
ERR_MSG_SERVICE_UNAVAILABLE = "service is unavailable, please check if the service is enabled"
ERR_MSG_SERVICE_BUSY = "service is busy, please try again later"
ERR_MSG_PERMISSION_DENY = "no permission to access this service"

# Log messages.
LOG_MSG_CREATE_SUCCESS = "create successfully"
LOG_MSG_CREATE_FAILED = "create failed"
LOG_MSG_DELETE_SUCCESS = "delete successfully"
LOG_MSG_DELETE_FAILED = "delete failed"
LOG_MSG_UPDATE_SUCCESS = "update successfully"
LOG_MSG_UPDATE_FAILED = "update failed"
LOG_MSG_TARGET_NOT_FOUND = "target not found"
LOG_MSG_DATABASE_ERROR = "database error"
LOG_MSG_REDIS_ERROR = "redis error"

# Message ids looked up by the translator.
I18N_SUCCESS = "common.success"
I18N_FAILED = "common.failed"
I18N_UPDATE_SUCCESS = "common.updateSuccess"
I18N_UPDATE_FAILED = "common.updateFailed"
I18N_CREATE_SUCCESS = "common.createSuccess"
I18N_CREATE_FAILED = "common.createFailed"
I18N_DELETE_SUCCESS = "common.deleteSuccess"
I18N_DELETE_FAILED = "common.deleteFailed"
I18N_TARGET_NOT_FOUND = "common.targetNotExist"
I18N_DATABASE_ERROR = "common.databaseError"
I18N_REDIS_ERROR = "common.redisError"
I18N_ALREADY_INIT = "init.alreadyInit"
I18N_INIT_RUNNING = "init.initializeIsRunning"
I18N_CONSTRAINT_ERROR = "common.constraintError"
I18N_VALIDATION_ERROR = "common.validationError"
I18N_NOT_SINGULAR_ERROR = "common.notSingularError"
I18N_PERMISSION_DENY = "common.permissionDeny"
I18N_SERVICE_UNAVAILABLE = "common.serviceUnavailable"
I18N_SERVICE_BUSY = "common.serviceBusy"
I18N_CACHE_ERROR = "common.cacheError"
I18N_API_REQUEST_FAILED = "sys.api.apiRequestFailed"

# Redis keys and channels.
REDIS_CAPTCHA_PREFIX = "CAPTCHA:"
REDIS_TOKEN_PREFIX = "BLACKLIST:TOKEN:"
REDIS_TENANT_BLACKLIST_PREFIX = "BLACKLIST:TENANT:"
REDIS_CASBIN_CHANNEL = "/casbin"
REDIS_API_PERMISSION_COUNT_PREFIX = "API:PERMISSION:"
REDIS_DATA_PERMISSION_PREFIX = "DATAPERM:"