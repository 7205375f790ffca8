"""Composite pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.infrastructure.composite.file_system import File, Folder


class CompositeDemo(IDemo):
    """Builds a small folder tree, prints it and reports folder sizes."""
    
    def get_name(self) -> str:
        return "composite"
    
    def get_description(self) -> str:
        return "Composite: treat files and nested folders uniformly"
    
    def run(self) -> None:
        document = File("document.txt", 10)
        image = File("image.png", 250)
        video = File("video.mp4", 1500)
        music = File("music.mp3", 5)
        notes = File("notes.txt", 2)
        
        documents = Folder("Documents")
        media = Folder("Media")
        images = Folder("Images")
        videos = Folder("Videos")
        root = Folder("Root")
        
        documents.add(document)
        documents.add(notes)
        
        images.add(image)
        videos.add(video)
        
        media.add(images)
        media.add(videos)
        media.add(music)
        
        root.add(documents)
        root.add(media)
        
        print("=== File System Structure ===\n")
        root.show_details("")
        
        print("\n=== Folder Sizes ===")
        print(f"Documents folder size: {documents.get_size()} KB")
        print(f"Media folder size: {media.get_size()} KB")
        print(f"Total root size: {root.get_size()} KB")
