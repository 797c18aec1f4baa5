import uvicorn
from kidlearning.main import app

if __name__ == "__main__":
    uvicorn.run(
        "kidlearning.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,  # 开发模式
    )
